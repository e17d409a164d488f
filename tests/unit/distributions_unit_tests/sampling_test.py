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
Unit Tests for Sample Generation Helpers

Tests cover:
- Min-max normalisation into [0, 1]
- High precision branches and their priority
- Degenerate inputs and warnings
- Normal samples mapped into the unit interval
"""

import warnings

import mpmath
import numpy as np
import pytest
from scipy import stats

from rdsym.distributions import LawOfSamples, normal_samples, sample_from_distribution


class ConstantDistribution:
    """Point mass exposing the rvs interface."""

    def __init__(self, value):
        self.value = value

    def rvs(self, size=None, random_state=None):
        return np.full(size, self.value, dtype=float)


class TestSampleFromDistribution:

    def test_normalised_range(self):
        samples = sample_from_distribution(100, stats.beta(2, 5), seed=0)
        assert len(samples) == 100
        assert samples.min() == 0.0
        assert samples.max() == 1.0
        assert np.all((samples >= 0) & (samples <= 1))

    def test_seed_reproducible(self):
        a = sample_from_distribution(20, stats.norm(), seed=5)
        b = sample_from_distribution(20, stats.norm(), seed=5)
        np.testing.assert_array_equal(a, b)

    def test_accepts_law_of_samples(self):
        law = LawOfSamples(stats.expon(), seed=2)
        samples = sample_from_distribution(30, law)
        assert samples.min() == 0.0
        assert samples.max() == 1.0

    def test_affine_invariance(self):
        a = sample_from_distribution(25, stats.norm(0, 1), seed=9)
        b = sample_from_distribution(25, stats.norm(10, 4), seed=9)
        np.testing.assert_allclose(a, b, atol=1e-12)

    def test_high_precision(self):
        samples = sample_from_distribution(10, stats.uniform(), high_precision=True, seed=1)
        assert samples.dtype == object
        assert all(isinstance(s, mpmath.mpf) for s in samples)
        assert min(samples) == 0
        assert max(samples) == 1

    def test_normal_high_precision(self):
        samples = sample_from_distribution(
            10, stats.beta(2, 2), normal_high_precision=True, seed=1
        )
        assert samples.dtype == object
        assert len(samples) == 10

    def test_high_precision_takes_priority(self):
        # expon is supported at arbitrary precision, both flags set
        a = sample_from_distribution(
            10, stats.expon(), high_precision=True, normal_high_precision=True, seed=3
        )
        b = sample_from_distribution(10, stats.expon(), high_precision=True, seed=3)
        assert list(a) == list(b)

    def test_high_precision_unsupported_family(self):
        with pytest.raises(ValueError, match="Supported families"):
            sample_from_distribution(10, stats.beta(2, 5), high_precision=True)

    def test_degenerate_samples_warn(self):
        with pytest.warns(UserWarning, match="samples are equal"):
            samples = sample_from_distribution(5, ConstantDistribution(0.5))
        assert len(samples) == 0

    def test_single_sample_is_degenerate(self):
        with pytest.warns(UserWarning):
            samples = sample_from_distribution(1, stats.norm(), seed=0)
        assert samples.size == 0

    def test_no_warning_for_regular_draw(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            sample_from_distribution(50, stats.uniform(), seed=0)

    @pytest.mark.parametrize("n", [0, -3, 2.0, True])
    def test_invalid_count(self, n):
        with pytest.raises(ValueError, match="positive integer"):
            sample_from_distribution(n, stats.uniform())

    def test_vector_law_rejected(self):
        law = LawOfSamples(stats.uniform(), sample_space_dimension=2, seed=0)
        with pytest.raises(ValueError, match="one-dimensional"):
            sample_from_distribution(10, law)


class TestNormalSamples:

    def test_range(self):
        samples = normal_samples(1000, seed=0)
        assert np.all((samples >= 0) & (samples <= 1))

    def test_at_most_n(self):
        samples = normal_samples(5000, seed=1)
        assert 0 < len(samples) <= 5000
        # three standard deviations keep almost everything
        assert len(samples) > 4950

    def test_centered(self):
        assert np.mean(normal_samples(5000, seed=2)) == pytest.approx(0.5, abs=0.02)

    def test_seed_reproducible(self):
        np.testing.assert_array_equal(normal_samples(10, seed=4), normal_samples(10, seed=4))

    def test_invalid_count(self):
        with pytest.raises(ValueError):
            normal_samples(0)
