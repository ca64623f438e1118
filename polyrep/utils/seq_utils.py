from __future__ import annotations

from typing import Callable, Sequence

from .exceptions import UnsupportedUnitLengthError


SubpatternFilter = Callable[[Sequence[str]], bool]


def is_degenerate_dinuc(window: Sequence[str]) -> bool:
    # 2-mer homopolymer
    return window[0] == window[1]


def is_degenerate_trinuc(window: Sequence[str]) -> bool:
    # 3-mer homopolymer
    return window[0] == window[1] == window[2]


def is_degenerate_tetranuc(window: Sequence[str]) -> bool:
    # two copies of one 2-mer; also covers 4-mer homopolymers
    return window[0] == window[2] and window[1] == window[3]


_SUBPATTERN_FILTERS: dict[int, SubpatternFilter] = {
    2: is_degenerate_dinuc,
    3: is_degenerate_trinuc,
    4: is_degenerate_tetranuc,
}


def get_subpattern_filter(unit_length: int) -> SubpatternFilter:
    """Return the degeneracy predicate for windows of ``unit_length`` symbols.

    The predicates only compare positions of equal phase, so they give the
    same answer for every rotation of a window and can be applied to the raw
    ring slots.
    """
    try:
        return _SUBPATTERN_FILTERS[unit_length]
    except KeyError:
        raise UnsupportedUnitLengthError(
            f"No subpattern filter for unit length {unit_length} (supported: {sorted(_SUBPATTERN_FILTERS)})"
        ) from None


def is_degenerate(window: Sequence[str]) -> bool:
    return get_subpattern_filter(len(window))(window)
