"""Benchmark the longest-match encoder on different kinds of text.

Run with:
    pytest benchmarks/benchmark_encode.py -v --benchmark-only
"""

import pytest

from macroman_encode import encode, encode_bytes


def _drain(source: str) -> int:
    count = 0
    for _ in encode(source):
        count += 1
    return count


@pytest.mark.benchmark(group="encode")
def test_benchmark_ascii(benchmark, ascii_document):
    """Baseline: one single-character match per step."""
    benchmark(_drain, ascii_document)


@pytest.mark.benchmark(group="encode")
def test_benchmark_accented(benchmark, accented_document):
    """Mixed composed and decomposed accents."""
    benchmark(_drain, accented_document)


@pytest.mark.benchmark(group="encode")
def test_benchmark_hostile(benchmark, hostile_document):
    """Mostly unmappable input, including failed pair candidates."""
    benchmark(_drain, hostile_document)


@pytest.mark.benchmark(group="encode")
def test_benchmark_table(benchmark, table_document):
    """Every table entry, repeatedly."""
    benchmark(_drain, table_document)


@pytest.mark.benchmark(group="encode-bytes")
def test_benchmark_encode_bytes_replace(benchmark, accented_document):
    """Byte collection with the replace policy."""
    benchmark(encode_bytes, accented_document, errors="replace")
