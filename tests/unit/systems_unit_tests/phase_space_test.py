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
Unit Tests for Phase Space Domains

Tests PhaseSpaceInterval membership and RDSDomain validation.
"""

import dataclasses

import mpmath
import pytest

from rdsym.systems.phase_space import UNIT_INTERVAL, PhaseSpaceInterval, RDSDomain
from rdsym.systems.utils.rds_validator import ShapeMismatchError


class TestPhaseSpaceInterval:

    def test_default_is_unit_interval(self):
        assert PhaseSpaceInterval() == UNIT_INTERVAL
        assert (UNIT_INTERVAL.lo, UNIT_INTERVAL.hi) == (0.0, 1.0)

    @pytest.mark.parametrize("x", [0.0, 0.5, 1.0, 1e-300, 0.9999999999])
    def test_contains_closed(self, x):
        assert UNIT_INTERVAL.contains(x)
        assert x in UNIT_INTERVAL

    @pytest.mark.parametrize("x", [-1e-12, 1.0000001, 5, float("nan"), float("inf")])
    def test_not_contains(self, x):
        assert not UNIT_INTERVAL.contains(x)

    def test_contains_returns_bool(self):
        assert UNIT_INTERVAL.contains(0.5) is True

    def test_mpf_membership(self):
        assert UNIT_INTERVAL.contains(mpmath.mpf("0.3"))

    def test_custom_interval(self):
        interval = PhaseSpaceInterval(-2, 3)
        assert interval.contains(-2) and interval.contains(3)
        assert str(interval) == "[-2, 3]"

    def test_degenerate_interval(self):
        point = PhaseSpaceInterval(0.5, 0.5)
        assert point.contains(0.5)
        assert not point.contains(0.6)

    def test_invalid_bounds(self):
        with pytest.raises(ValueError, match="lo <= hi"):
            PhaseSpaceInterval(1.0, 0.0)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            UNIT_INTERVAL.lo = -1.0


class TestRDSDomain:

    def test_valid_domain(self):
        domain = RDSDomain(3, [True, False, True])
        assert domain.dim == 3
        assert domain.modulo_coordinates == [True, False, True]
        assert domain.wrapped_coordinates == [0, 2]

    def test_torus(self):
        domain = RDSDomain.torus(4)
        assert domain.modulo_coordinates == [True] * 4

    def test_length_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="expected dim=2"):
            RDSDomain(2, [True])

    @pytest.mark.parametrize("dim", [0, -1, 2.0, True])
    def test_invalid_dim(self, dim):
        with pytest.raises(ValueError, match="dim"):
            RDSDomain(dim, [])

    def test_flags_coerced_to_bool(self):
        domain = RDSDomain(2, [1, 0])
        assert domain.modulo_coordinates == [True, False]
