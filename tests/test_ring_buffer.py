import pytest

from polyrep.utils.ring_buffer import RingBuffer


def test_write_read_wraps_modulo_capacity():
    ring = RingBuffer(3)
    for pos, symbol in enumerate("ACGTA"):
        ring.write(pos, symbol)
    assert ring.read(3) == "T"
    assert ring.read(0) == "T"
    assert ring.read(4) == "A"
    assert ring.slots == ("T", "A", "G")


def test_read_before_write_returns_symbol_one_cycle_back():
    ring = RingBuffer(2)
    ring.write(10, "A")
    ring.write(11, "T")
    assert ring.read(12) == "A"
    assert ring.read(13) == "T"


def test_rotated_starts_at_offset():
    ring = RingBuffer(4)
    for pos, symbol in enumerate("ACGT"):
        ring.write(pos, symbol)
    assert ring.rotated(0) == "ACGT"
    assert ring.rotated(1) == "CGTA"
    assert ring.rotated(6) == "GTAC"


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        RingBuffer(0)
