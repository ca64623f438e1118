import pytest

from polyrep.config import ScanOptions
from polyrep.modules.homopolymer_scanner import HomopolymerScanner
from polyrep.modules.line_scanner import LineScanner
from polyrep.modules.repeat_scanner import RepeatScanner
from polyrep.modules.scanner_factory import make_scanner
from polyrep.utils.exceptions import ScannerStateError


def _scan(sequence, unit_length, min_length, chrom="chr"):
    scanner = RepeatScanner(chrom, ScanOptions(unit_length=unit_length, min_length=min_length))
    return [(r.chrom, r.start, r.end, r.unit) for r in scanner.scan(sequence)]


def test_dinuc_repeat():
    assert _scan("ATATATAT", 2, 4) == [("chr", 0, 8, "AT")]


def test_dinuc_scan_over_homopolymer_reports_nothing():
    assert _scan("AAAAAAAA", 2, 4) == []


def test_trinuc_repeat():
    assert _scan("CAGCAGCAG", 3, 6) == [("chr", 0, 9, "CAG")]


def test_trinuc_scan_over_homopolymer_reports_nothing():
    assert _scan("G" * 30, 3, 4) == []


def test_tetranuc_repeat():
    assert _scan("AATTAATTAATT", 4, 8) == [("chr", 0, 12, "AATT")]


def test_tetranuc_scan_over_dinuc_repeat_reports_nothing():
    assert _scan("AT" * 20, 4, 5) == []
    assert _scan("C" * 20, 4, 5) == []


def test_unit_is_phase_aligned_with_run_start():
    assert _scan("GTATAT", 2, 4) == [("chr", 1, 6, "TA")]


def test_degenerate_window_is_not_a_seed():
    assert _scan("AAATATAT", 2, 4) == [("chr", 2, 8, "AT")]


def test_mismatch_flushes_and_reseeds():
    assert _scan("ATATATGGCGCGC", 2, 4) == [
        ("chr", 0, 6, "AT"),
        ("chr", 7, 13, "GC"),
    ]


def test_ambiguous_symbol_restarts_window():
    assert _scan("ATATNATAT", 2, 4) == [
        ("chr", 0, 4, "AT"),
        ("chr", 5, 9, "AT"),
    ]


def test_ambiguous_runs_never_reported():
    for unit_length in (2, 3, 4):
        assert _scan("N" * 40, unit_length, unit_length + 1) == []


@pytest.mark.parametrize("newline", ["\n", "\r\n"])
def test_newlines_are_transparent(newline):
    sequence = "ATATATGGCGCGCNCAGCAGCAG"
    expected = _scan(sequence, 2, 4)
    wrapped = newline.join(sequence[i : i + 5] for i in range(0, len(sequence), 5))
    assert _scan(wrapped, 2, 4) == expected
    assert _scan(newline + sequence + newline, 2, 4) == expected


def test_header_prefix_ends_chromosome():
    scanner = RepeatScanner("chr", ScanOptions(unit_length=2, min_length=4))
    records = list(scanner.scan("ATATAT>ATATATAT"))
    assert [(r.start, r.end, r.unit) for r in records] == [(0, 6, "AT")]
    assert scanner.finished
    assert scanner.position == 6


def test_push_after_finish_is_rejected():
    scanner = RepeatScanner("chr", ScanOptions(unit_length=2, min_length=4))
    for symbol in "ATATAT":
        assert scanner.push(symbol) is None
    record = scanner.finish()
    assert (record.start, record.end, record.length) == (0, 6, 6)
    assert scanner.finish() is None
    with pytest.raises(ScannerStateError):
        scanner.push("A")


def test_make_scanner_selects_by_unit_length():
    assert isinstance(make_scanner("chr", ScanOptions(unit_length=1, min_length=2)), HomopolymerScanner)
    for unit_length in (2, 3, 4):
        scanner = make_scanner("chr", ScanOptions(unit_length=unit_length, min_length=10))
        assert isinstance(scanner, RepeatScanner)
        assert scanner.window.capacity == unit_length


def test_line_scanner_is_abstract():
    with pytest.raises(TypeError):
        LineScanner("chr", ScanOptions(unit_length=2, min_length=4))
