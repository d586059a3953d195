"""Services module - Diff logic layer"""

from .char_aligner import lcs_length, lcs_matches, lcs_table
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .document_assembler import render_document, write_document
from .errors import DiffError, ResourceExhausted, UsageError
from .line_renderer import (
    escape_html,
    render_line_pair,
    render_new_segments,
    render_old_segments,
    segments_to_html,
)

__all__ = [
    "lcs_length",
    "lcs_matches",
    "lcs_table",
    "ConfigManager",
    "DiffGenerator",
    "render_document",
    "write_document",
    "DiffError",
    "ResourceExhausted",
    "UsageError",
    "escape_html",
    "render_line_pair",
    "render_new_segments",
    "render_old_segments",
    "segments_to_html",
]
