"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from models.diff import CompareRequest, DiffResult, LineDiffRequest, LineDiffResponse
from services.char_aligner import lcs_matches
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.document_assembler import render_document
from services.errors import ResourceExhausted
from services.line_renderer import render_new_segments, render_old_segments, segments_to_html

router = APIRouter()


def run_compare(request: CompareRequest) -> DiffResult:
    """Compare the request texts with the configured generator"""
    generator = DiffGenerator.from_config(ConfigManager.get_instance())
    try:
        return generator.compare_text(
            request.old_text,
            request.new_text,
            request.old_name,
            request.new_name,
            pairing=request.pairing,
        )
    except ResourceExhausted as e:
        raise HTTPException(status_code=413, detail=str(e))


@router.post("/compare", response_model=DiffResult)
def compare(request: CompareRequest) -> DiffResult:
    """Compare two texts and return the row records"""
    return run_compare(request)


@router.post("/html", response_class=HTMLResponse)
def compare_html(request: CompareRequest) -> HTMLResponse:
    """Compare two texts and return the full HTML page"""
    return HTMLResponse(content=render_document(run_compare(request)))


@router.post("/line", response_model=LineDiffResponse)
def compare_line(request: LineDiffRequest) -> LineDiffResponse:
    """Character-level diff of a single pair of lines"""
    max_cells = ConfigManager.get_instance().get_max_table_cells()
    try:
        matches = lcs_matches(request.old_line, request.new_line, max_cells)
    except ResourceExhausted as e:
        raise HTTPException(status_code=413, detail=str(e))

    left = render_old_segments(request.old_line, request.new_line, matches)
    right = render_new_segments(request.old_line, request.new_line, matches)

    return LineDiffResponse(
        matches=matches,
        lcs_length=len(matches),
        left=left,
        right=right,
        left_html=segments_to_html(left),
        right_html=segments_to_html(right),
    )
