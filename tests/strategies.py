"""Hypothesis strategies shared across tests."""

from __future__ import annotations

from hypothesis import strategies as st

# Small alphabet so random lines share characters often
short_lines = st.text(alphabet="abc<&\"' ", min_size=0, max_size=12)

any_lines = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n"),
    min_size=0,
    max_size=20,
)

old_only_chars = st.text(alphabet="abc&", min_size=1, max_size=12)
new_only_chars = st.text(alphabet="xyz<", min_size=1, max_size=12)

line_lists = st.lists(st.text(alphabet="ab", min_size=0, max_size=3), max_size=6)
