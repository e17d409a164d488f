# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Phase Space Domains
===================

The phase space M of a random dynamical system and the coordinate-wise
domain description.

Main Classes
------------
PhaseSpaceInterval : Closed interval [lo, hi] with membership test
RDSDomain : Dimension plus per-coordinate modulo-1 flags

Usage
-----
>>> M = PhaseSpaceInterval(0.0, 1.0)
>>> M.contains(0.5)
True
>>> 1.0 in M
True
>>> M.contains(1.2)
False
"""

from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, List

from .utils.rds_validator import ShapeMismatchError


@dataclass(frozen=True)
class PhaseSpaceInterval:
    """
    Closed-closed real interval [lo, hi].

    Attributes
    ----------
    lo : float
        Lower bound (inclusive)
    hi : float
        Upper bound (inclusive)

    Raises
    ------
    ValueError
        If lo > hi

    Examples
    --------
    >>> unit = PhaseSpaceInterval()
    >>> unit.contains(0.0), unit.contains(1.0)
    (True, True)
    """

    lo: Any = 0.0
    hi: Any = 1.0

    def __post_init__(self):
        if not self.lo <= self.hi:
            raise ValueError(
                f"Phase space interval requires lo <= hi, got [{self.lo}, {self.hi}]"
            )

    def contains(self, x: Any) -> bool:
        """Return True when lo <= x <= hi (NaN is never contained)."""
        return bool(self.lo <= x <= self.hi)

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def __str__(self) -> str:
        return f"[{self.lo}, {self.hi}]"


UNIT_INTERVAL = PhaseSpaceInterval(0.0, 1.0)


@dataclass(frozen=True)
class RDSDomain:
    """
    Coordinate-wise domain description.

    Records for each of the ``dim`` coordinates whether it is taken modulo 1.
    The sampler does not consume this yet; it always wraps every coordinate.

    Attributes
    ----------
    dim : int
        Number of coordinates (positive)
    modulo_coordinates : List[bool]
        One flag per coordinate

    Raises
    ------
    ValueError
        If dim is not a positive integer
    ShapeMismatchError
        If len(modulo_coordinates) != dim

    Examples
    --------
    >>> torus_and_line = RDSDomain(2, [True, False])
    >>> torus_and_line.wrapped_coordinates
    [0]
    """

    dim: int
    modulo_coordinates: List[bool] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.dim, bool) or not isinstance(self.dim, Integral) or self.dim <= 0:
            raise ValueError(f"dim must be a positive integer, got {self.dim!r}")
        flags = [bool(flag) for flag in self.modulo_coordinates]
        if len(flags) != self.dim:
            raise ShapeMismatchError(
                f"modulo_coordinates has {len(flags)} entries, expected dim={self.dim}"
            )
        object.__setattr__(self, "modulo_coordinates", flags)

    @classmethod
    def torus(cls, dim: int) -> "RDSDomain":
        """Every coordinate wraps modulo 1."""
        return cls(dim, [True] * dim)

    @property
    def wrapped_coordinates(self) -> List[int]:
        """Indices of coordinates taken modulo 1."""
        return [i for i, flag in enumerate(self.modulo_coordinates) if flag]
