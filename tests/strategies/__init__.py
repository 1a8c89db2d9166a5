"""Hypothesis strategies for scanning tests."""

from __future__ import annotations

from hypothesis import strategies as st

from tests.helpers.grammar import END, NUMBER, WORD
from tokenless import Char, Literal

# Printable single-line text without the NUL sentinel.
scan_lines = st.text(
    alphabet=st.characters(blacklist_categories=["Cc", "Cs"], blacklist_characters=["\x00"]),
    min_size=0,
    max_size=60,
)

# Small ASCII alphabet so probes actually match now and then.
ascii_lines = st.text(alphabet="ab12 +-()if\t", min_size=0, max_size=30)

literal_probes = st.text(alphabet="ab12 +-()if", min_size=0, max_size=4).map(Literal)
char_probes = st.sampled_from("ab12 +-()\t\0").map(Char)
terminal_probes = st.sampled_from([WORD, NUMBER, END])

probes = st.one_of(literal_probes, char_probes, terminal_probes)
