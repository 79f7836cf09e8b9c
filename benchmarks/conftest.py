"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from macroman_encode.table import KNOWN_SEQUENCES


@pytest.fixture
def ascii_document() -> str:
    """Plain ASCII prose (~100KB)."""
    return "The quick brown fox jumps over the lazy dog. " * 2200


@pytest.fixture
def accented_document() -> str:
    """French prose with composed and decomposed accents (~100KB)."""
    composed = "D\xe9j\xe0 vu: le na\xeff gar\xe7on a mang\xe9 une cr\xe8me br\xfbl\xe9e. "
    decomposed = (
        "De\N{COMBINING ACUTE ACCENT}ja\N{COMBINING GRAVE ACCENT} vu: "
        "le nai\N{COMBINING DIAERESIS}f garc\N{COMBINING CEDILLA}on. "
    )
    return (composed + decomposed) * 1000


@pytest.fixture
def hostile_document() -> str:
    """Text where most scalar values have no MacRoman code (~50K chars)."""
    return "\U0001f600\N{SNOWMAN}\N{LATIN SMALL LETTER THORN}a\N{COMBINING MACRON}" * 10000


@pytest.fixture
def table_document() -> str:
    """Every table source once, in table order."""
    return "".join(source for source, _ in KNOWN_SEQUENCES) * 100
