"""The fixed set of polynomial pairs exercised by the report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

__all__ = ["CaseInput", "iter_cases"]


@dataclass(frozen=True)
class CaseInput:
    """One pair of polynomials with their recorded degrees.

    Coefficients are in ascending order of power. The recorded degree is
    kept as given and is not derived from the coefficient list.
    """

    degree1: int
    coeffs1: Tuple[float, ...]
    degree2: int
    coeffs2: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs1", _as_floats(self.coeffs1))
        object.__setattr__(self, "coeffs2", _as_floats(self.coeffs2))


def _as_floats(values: Iterable[float]) -> Tuple[float, ...]:
    return tuple(float(v) for v in values)


_CASES = (
    (10, (-7, -5, -13, 1, 5, 12, 2, -3, -14, -4, -9),
     9, (-10, -1, 7, -3, -12, -4, 12, 12, -8, 9)),
    (8, (6, -2, 6, -4, 4, 1, 0, -13, -8),
     5, (-6, 9, -5, 9, 11, 15)),
    (3, (-7, 13, -8, 8),
     7, (15, -2, 1, -4, 0, 14, -5, -6)),
    (4, (-10, -12, 11, 5, -9),
     11, (-2, -2, 5, -8, 4, -5, 0, -6, 2, 1, 14, 13)),
    (9, (-3, -8, -13, 5, 6, 13, -8, -5, -11, 8),
     3, (-11, -2, -3, -5)),
    (0, (-11,),
     4, (2, -12, -1, 15, 2)),
    (9, (0, 4, -6, -4, 13, 12, 10, -1, -3, -3),
     2, (8, 3, -6)),
    (9, (-3, -4, -14, -5, 11, -13, -14, 5, -13, -4),
     10, (8, -12, 9, -11, 12, -10, -12, 15, 11, 1, -9, 0)),
    (10, (7, -7, 8, 12, 13, 11, 8, 8, 9, 9, -3),
     6, (14, -12, -10, -8, 2, -10, 4)),
    (5, (10, -6, 2, -1, -10, 2),
     9, (12, 14, 12, 13, -5, 5, 9, 13, -5, 5)),
    (9, (2, -2, -2, 9, -10, -12, 2, -10, -14, 5),
     7, (6, 0, -12, 4, -8, -2, 1, 4)),
    (11, (11, 11, 8, -13, 15, 0, -13, -6, 3, 4, 6, 12),
     3, (-7, -2, 9, -13)),
    (10, (5, -7, 13, 10, 2, 15, -8, -3, -14, -4, 10),
     9, (11, 3, 11, -14, 4, -8, 12, 6, -2, -7)),
    (5, (9, -6, -14, -4, 3, -12),
     11, (2, 1, 1, 5, 6, -3, 12, 2, 7, 12, -13, 15)),
    (7, (9, -4, -8, -5, 6, -3, 11, 5, 0),
     7, (4, -5, -5, 4, 2, 6, -5, 1)),
    (2, (14, 2, -1),
     10, (-4, 11, -7, -2, 10, -13, 11, 10, -13, -7, -6)),
    (9, (-5, -1, 6, -1, -1, 4, 0, 2, -8, 2),
     4, (-2, -6, 11, -5, -4)),
    (10, (12, 12, 10, -3, 8, -2, -11, -1, 11, 2, 11),
     2, (-1, -6, -12)),
    (1, (-8, 3),
     7, (0, -4, 1, -11, -5, -8, -2, -3)),
    (0, (3,),
     7, (11, 1, 9, -13, 15, 2, -8, 14)),
    (0, (4,),
     11, (-7, 8, -8, 8, 6, -11, -9, -11, -4, -14, -4, 8)),
    (6, (-14, 7, 15, 2, 4, 9, 15),
     3, (-8, 13, -12, -13)),
    (1, (14, -14),
     3, (-7, 11, -10, 3)),
    (6, (-13, 7, -12, 8, 1, 8, 10, 7, 6),
     3, (13, -12, -2, -2)),
    (2, (-6, -1, 3),
     6, (10, -3, -1, 2, 15, -5, 14)),
    (0, (12,),
     9, (11, 5, 3, 12, 14, -2, -12, 11, -6, -14)),
    (11, (-2, -5, 14, -1, -3, -8, 2, 14, 6, -5, -4, -8),
     10, (-12, -7, 7, 9, -9, -12, 2, -2, 14, -9, -11, 0)),
    (1, (-1, -2),
     9, (-2, -9, 4, -9, -13, -10, 12, 4, 14, 9)),
    (7, (-7, 15, -7, -4, 3, 3, 9, 8),
     3, (-9, -3, 0, 2)),
    (6, (-10, 15, 6, -12, 14, 6, -14),
     10, (8, -3, -7, 7, -14, -11, 9, -3, -10, 3, 7)),
    (3, (1, 7, -14, 1),
     2, (-9, 9, -11)),
    (11, (7, -9, -9, -3, 10, 2, -14, -4, 6, -12, 10, 14),
     0, (6,)),
    (0, (-12,),
     7, (13, 11, 8, 0, -6, -13, 5, 8)),
    (5, (14, -4, -1, -5, 13, 14),
     9, (-3, -6, -6, -2, 15, -12, -12, -3, 12, -12)),
    (0, (3,),
     1, (13, 3)),
    (9, (-6, -13, -9, 2, 8, 12, -1, 15, 2, -11),
     2, (-7, 4, 2)),
    (4, (-14, 3, -5, -3, 5),
     8, (10, -13, -6, -9, 8, 0, -2, -6, 4)),
    (3, (-6, -8, 6, 1),
     10, (-4, 1, -12, 3, -1, -1, 5, 12, 8, 9, 13)),
    (1, (-7, 4),
     7, (-3, -5, 7, 14, 11, -7, 4, 5)),
    (4, (4, -14, -12, 14, -11),
     9, (4, 11, -7, 2, 5, -2, 6, 9, -4, 1)),
    (5, (-9, -12, -8, 10, -3, -9),
     2, (-7, -3, 13)),
    (5, (-4, -7, -2, -5, 14, -5),
     7, (14, 15, -11, 4, -5, 13, -4, -5)),
    (10, (-13, -5, 1, -9, 12, -3, 1, 9, -10, 1, -10),
     8, (5, 13, 4, 1, 11, 10, 7, -14, 8)),
    (0, (9,),
     7, (-7, -4, 10, -2, -13, -1, 5, 11)),
    (9, (0, 1, 1, 15, -11, 7, 13, -7, 12, 0),
     1, (9, 4)),
    (0, (11,),
     0, (9,)),
    (10, (0, 13, 1, 10, 3, 15, -1, -5, -7, 8, 10),
     4, (11, 0, 2, 9, 13)),
    (7, (12, -13, -6, -14, -1, 3, 0, -9),
     10, (-4, -14, 13, -8, -14, -7, -5, -9, -7, -11, -4)),
    (5, (-8, 9, 2, -5, 5, 3),
     10, (15, 2, 12, -3, 9, -6, -3, 4, 13, -8, 4)),
    (3, (11, -13, -4, -13),
     4, (-7, 10, 11, -1, -13)),
    (4, (7, -5, 4, -1, 6),
     1, (-1, 10)),
    (0, (5,),
     7, (-14, 0, 10, -2, -8, -11, 11, -7)),
    (11, (-9, -1, 14, 15, -13, 15, -12, -12, -5, 14, -7, 15),
     6, (-10, -4, 2, 11, -10, -6, 6)),
    (11, (-5, 0, 12, 13, 14, -9, -14, 1, 15, 10, -1, -8),
     9, (-1, -6, 11, 4, 8, 1, 0, 6, 9, 11)),
    (10, (-1, -3, 12, 11, -8, -14, 6, -7, 1, -13, -8),
     8, (14, 11, 2, -12, 11, -9, 4, 0, -4)),
    (3, (14, 9, -14, -6),
     3, (-6, -2, -13, -11)),
    (8, (10, 1, -10, 7, 9, -2, 4, -13, -11),
     10, (-3, 0, -5, -14, -9, 11, -6, 14, -4, -3, 5)),
    (10, (-8, -2, 5, 12, -9, -3, 6, -6, 1, 5, -7),
     10, (-8, -10, 8, -11, 11, -13, -3, -6, 7, 9, 11)),
    (2, (-4, -9, 4),
     7, (6, 12, -9, -13, 10, 9, -3, 9)),
    (6, (15, -13, 0, -10, -2, -9, -14),
     0, (6,)),
    (4, (13, -13, 3, 2, 2),
     6, (7, 2, -6, -12, -3, -5, 8)),
    (2, (1, 10, -7),
     9, (7, -1, -12, -9, -2, 8, 7, -8, -4, -10)),
    (4, (10, 4, -1, -8, -14, 0),
     2, (0, -13, 9)),
    (0, (2,),
     0, (12,)),
    (5, (-14, -1, 6, 7, -2, 14),
     3, (-3, -14, 7, -13)),
    (4, (-14, 6, 2, 15, 15),
     0, (14,)),
    (1, (9, -7),
     1, (7, 1)),
    (5, (-14, -6, -13, 1, 11, -7),
     10, (11, 4, 7, 14, 15, -9, -11, 5, 5, 7, 11)),
    (6, (12, -2, -9, 0, 1, -1, -9),
     7, (8, -9, 8, -13, 15, 10, -14, -5)),
    (10, (-5, 7, -1, 0, -9, 8, 6, 10, 11, -5, -11),
     9, (-2, 3, 2, 14, 2, -11, -12, 14, -3, -13)),
    (11, (8, 8, 3, -8, -13, -3, 3, 8, 0, -11, -9, 6),
     11, (1, -4, -5, -7, -8, -5, -5, -1, -14, -10, 6, 12)),
    (8, (4, -9, 10, -14, 5, -4, -12, -3, 1),
     0, (15,)),
    (11, (-7, 14, 0, 15, 14, 8, -3, -10, 4, 1, 15, 4),
     1, (7, -2)),
    (5, (-9, 1, 0, -9, -13, -3),
     6, (1, 6, 2, -6, 12, 1, -1)),
    (11, (1, -3, -7, -11, -11, 0, 10, -14, -5, -12, 0, 9),
     0, (-9,)),
    (5, (-11, -6, 8, 2, 6, -5),
     10, (-8, -10, -9, -14, -14, -6, 5, 13, 14, 9, -5)),
    (2, (8, 4, -14),
     11, (6, -8, -13, 13, 6, 2, -2, -12, 0, 6, -9, 5)),
    (3, (13, -1, -1, -13),
     3, (-1, -7, 6, -7)),
    (3, (10, -7, 6, -7),
     10, (-12, -1, 14, -6, -12, 15, 1, -2, 4, -11, -8)),
    (4, (-14, 10, 0, -9, -2),
     11, (3, 15, 1, -1, 9, 3, 10, 15, -10, -9, 14, 7)),
    (0, (11,),
     0, (-14,)),
    (2, (5, 1, -1),
     9, (-10, -11, 7, 3, 0, -2, 6, -6, -14, -1)),
    (6, (-12, 7, -5, -9, -7, 6, 2),
     10, (5, -14, -1, -7, -5, -11, 12, 2, 11, -1, 3)),
    (11, (-13, -5, 0, -10, 12, -11, -1, -11, -4, -9, 2, -8),
     7, (5, -6, 13, -13, 10, 9, 0, -3)),
    (6, (-9, 3, 10, -9, 7, -2, 14),
     9, (8, 15, -14, -12, -6, 5, -10, -13, 1, -7)),
    (0, (15,),
     1, (-12, -8)),
    (10, (-14, 1, 15, -9, 12, 14, 8, 5, 15, -3, 1),
     5, (-5, 14, 7, 4, 13, -8)),
    (5, (10, 8, 4, 13, 0, 3),
     9, (12, 11, -9, 11, 11, 15, 13, -13, -2, 15)),
    (8, (-14, -1, 2, 8, -12, -12, 15, 9, 5),
     5, (-9, -4, -14, -1, 9, 13)),
    (6, (-3, -4, 11, -9, -10, 5, -9),
     2, (-13, -6, -5)),
    (1, (-14, -6),
     8, (5, 1, 11, 7, -13, 6, 6, 15, -3)),
    (8, (11, -5, 14, -8, -1, 6, 0, 12, -14),
     7, (-3, 7, 2, 12, -6, -9, 14, 8)),
    (7, (3, -12, 13, 11, -11, 2, -5, -14),
     3, (-6, 9, -6, 11)),
    (4, (-8, 2, -10, -8, -2),
     2, (-8, -11, -3)),
    (10, (1, 1, 7, -9, 7, -9, -9, -12, 14, -14, -10),
     4, (1, -3, 12, -2, -5, 0)),
    (7, (-13, 3, -5, -13, 10, -6, -5, 12),
     10, (-4, 8, -12, 0, 14, 2, 10, 11, 1, -9, 12)),
    (6, (-4, 13, -6, 5, -7, 10, 2),
     7, (5, 2, 9, 14, -13, -10, -14, 12)),
    (9, (-11, 10, 15, 4, 3, 14, -1, 1, 5, 5),
     2, (15, -10, -12)),
    (8, (5, -9, 14, 2, -12, -4, 13, 1, 14),
     5, (0, -14, -9, -11, 14, -1)),
    (4, (12, 6, -4, -8, -8),
     5, (3, 10, 0, 4, -2, -2)),
)


def iter_cases() -> Iterator[CaseInput]:
    """Yield the hundred polynomial pairs in their fixed order."""
    for degree1, coeffs1, degree2, coeffs2 in _CASES:
        yield CaseInput(degree1, coeffs1, degree2, coeffs2)