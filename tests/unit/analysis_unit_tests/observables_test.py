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
Unit Tests for Observables and Empirical Statistics

Tests cover:
- Observable and random observable time series
- Argument dispatch of timeseries()
- Empirical, ensemble and summary statistics
- Shape errors on ragged or misaligned input
"""

import numpy as np
import pytest
from scipy import stats

from rdsym.analysis import (
    empirical_average,
    ensemble_average,
    observable_timeseries,
    random_timeseries,
    timeseries,
    trajectory_statistics,
)
from rdsym.distributions import LawOfSamples
from rdsym.systems.phase_space import UNIT_INTERVAL
from rdsym.systems.random_dynamical_system import RandomDynamicalSystem
from rdsym.systems.utils.rds_validator import ShapeMismatchError


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def traj():
    return np.array([[0.1, 0.2], [0.3, 0.4], [0.5, 0.6], [0.7, 0.8]])


@pytest.fixture
def rotation():
    return RandomDynamicalSystem(
        UNIT_INTERVAL, 1, LawOfSamples(stats.uniform(0, 0.1), seed=7), lambda omega, x: x + omega
    )


# ============================================================================
# Time Series
# ============================================================================


class TestObservableTimeseries:

    def test_length_matches(self, traj):
        assert len(timeseries(traj, np.sin)) == len(traj)

    def test_initial_state_unchanged(self, traj):
        ts = timeseries(traj, lambda x: 100 * x)
        np.testing.assert_array_equal(ts[0], traj[0])

    def test_applied_coordinatewise(self, traj):
        ts = timeseries(traj, lambda x: x ** 2)
        for i in range(1, len(traj)):
            for j in range(traj.shape[1]):
                assert ts[i][j] == pytest.approx(traj[i][j] ** 2)

    def test_read_only(self, traj):
        ts = observable_timeseries(traj, abs)
        with pytest.raises(ValueError):
            ts[0, 0] = 1.0

    def test_nested_lists(self):
        ts = timeseries([[1.0], [2.0], [3.0]], lambda x: -x)
        np.testing.assert_array_equal(ts, [[1.0], [-2.0], [-3.0]])

    def test_single_state(self):
        ts = timeseries([[0.25, 0.75]], lambda x: 0.0)
        np.testing.assert_array_equal(ts, [[0.25, 0.75]])

    def test_string_observable_keeps_initial_state(self):
        ts = timeseries([[0.2, 0.8], [0.3, 0.9]], lambda x: "hi" if x > 0.5 else "lo")
        assert ts.dtype == object
        assert ts[0][0] == 0.2 and ts[0][1] == 0.8
        assert list(ts[1]) == ["lo", "hi"]

    def test_vector_valued_observable(self, traj):
        ts = timeseries(traj, lambda x: (x, x ** 2))
        assert ts.shape == (4, 2)
        np.testing.assert_array_equal(ts[0].astype(float), traj[0])
        assert ts[2][1] == pytest.approx((0.6, 0.36))

    def test_integer_observable_stays_numeric(self, traj):
        ts = timeseries(traj, lambda x: int(x > 0.5))
        assert ts.dtype == float
        np.testing.assert_array_equal(ts, [[0.1, 0.2], [0, 0], [0, 1], [1, 1]])

    def test_ragged_trajectory(self):
        with pytest.raises(ShapeMismatchError, match="State 1"):
            timeseries([[0.1, 0.2], [0.3]], np.sin)

    def test_empty_trajectory(self):
        with pytest.raises(ShapeMismatchError):
            timeseries([], np.sin)


class TestRandomTimeseries:

    def test_uses_producing_omega(self, traj):
        omegas = [10.0, 20.0, 30.0]
        ts = timeseries(traj, omegas, lambda omega, x: x + omega)
        np.testing.assert_array_equal(ts[0], traj[0])
        for k in range(1, len(traj)):
            np.testing.assert_allclose(ts[k], traj[k] + omegas[k - 1])

    def test_matches_explicit_form(self, traj):
        omegas = [0.5, 1.5, 2.5]
        phi = lambda omega, x: omega * x  # noqa: E731
        np.testing.assert_array_equal(
            timeseries(traj, omegas, phi), random_timeseries(traj, omegas, phi)
        )

    def test_vector_omega(self):
        traj = [[0.0], [1.0], [2.0]]
        omegas = [np.array([1.0, 2.0]), np.array([3.0, 4.0])]
        ts = random_timeseries(traj, omegas, lambda omega, x: omega[0] * x + omega[1])
        np.testing.assert_allclose(ts, [[0.0], [3.0], [10.0]])

    def test_sampled_trajectory(self, rotation):
        traj, omegas = rotation.sample_trajectory(20, [0.3], return_omegas=True)
        ts = timeseries(traj, omegas, lambda omega, x: x - omega)
        assert len(ts) == 21
        # undoing the last rotation gives back the previous state
        for k in range(1, len(traj)):
            assert ts[k][0] % 1.0 == pytest.approx(traj[k - 1][0], abs=1e-12)

    def test_tuple_valued_random_observable(self, traj):
        ts = random_timeseries(traj, [1.0, 2.0, 3.0], lambda omega, x: (omega, x))
        assert ts.dtype == object
        assert ts[3][0] == (3.0, 0.7)
        assert ts[0][1] == 0.2

    @pytest.mark.parametrize("n_omegas", [0, 2, 4])
    def test_misaligned_omegas(self, traj, n_omegas):
        with pytest.raises(ShapeMismatchError, match="Expected 3 omega values"):
            timeseries(traj, [0.0] * n_omegas, lambda omega, x: x)


class TestTimeseriesDispatch:

    def test_no_observable(self, traj):
        with pytest.raises(TypeError):
            timeseries(traj)

    def test_too_many_arguments(self, traj):
        with pytest.raises(TypeError):
            timeseries(traj, [0.0] * 3, np.sin, np.cos)


# ============================================================================
# Averages
# ============================================================================


class TestEmpiricalAverage:

    def test_constant_trajectory(self):
        n = 10
        np.testing.assert_array_equal(empirical_average([[0.5, 0.5]] * (n + 1)), [0.5, 0.5])

    def test_mean_per_coordinate(self, traj):
        np.testing.assert_allclose(empirical_average(traj), [0.4, 0.5])

    def test_of_timeseries(self, traj):
        ts = timeseries(traj, lambda x: 1.0)
        # index 0 is the raw initial state
        np.testing.assert_allclose(empirical_average(ts), [(0.1 + 3) / 4, (0.2 + 3) / 4])

    def test_ragged(self):
        with pytest.raises(ShapeMismatchError):
            empirical_average([[0.1, 0.2], [0.3]])

    def test_empty(self):
        with pytest.raises(ShapeMismatchError):
            empirical_average([])

    def test_uniform_rotation_mean(self):
        system = RandomDynamicalSystem(
            UNIT_INTERVAL, 1, LawOfSamples(stats.uniform(0, 1), seed=0), lambda omega, x: x + omega
        )
        traj = system.sample_trajectory(5000, [0.0], mode="annealed")
        assert empirical_average(traj)[0] == pytest.approx(0.5, abs=0.05)


class TestEnsembleAverage:

    def test_shape(self, rotation):
        ensemble = rotation.sample_ensemble(15, [0.2, 0.4], n_paths=6)
        assert ensemble_average(ensemble).shape == (16, 2)

    def test_mean_over_paths(self):
        ensemble = np.array([[[0.0], [1.0]], [[2.0], [3.0]]])
        np.testing.assert_array_equal(ensemble_average(ensemble), [[1.0], [2.0]])

    def test_initial_step_is_x0(self, rotation):
        ensemble = rotation.sample_ensemble(5, [0.2, 0.4], n_paths=3)
        np.testing.assert_allclose(ensemble_average(ensemble)[0], [0.2, 0.4])

    def test_rejects_single_trajectory(self, traj):
        with pytest.raises(ShapeMismatchError, match="n_paths"):
            ensemble_average(traj)


class TestTrajectoryStatistics:

    def test_fields(self, traj):
        stats_ = trajectory_statistics(traj)
        assert stats_["n_states"] == 4
        np.testing.assert_allclose(stats_["mean"], [0.4, 0.5])
        np.testing.assert_allclose(stats_["min"], [0.1, 0.2])
        np.testing.assert_allclose(stats_["max"], [0.7, 0.8])
        np.testing.assert_allclose(stats_["std"], np.std(traj, axis=0))
