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
rdsym - Random Dynamical System Simulation
==========================================

Sample trajectories of random maps x ↦ f(ω, x) mod 1 on [0, 1] driven by
i.i.d. random parameters, under quenched or annealed dynamics, and derive
time series, averages and plots from them.

>>> from scipy import stats
>>> import rdsym
>>>
>>> system = rdsym.RandomDynamicalSystem(
...     rdsym.PhaseSpaceInterval(0, 1),
...     1,
...     rdsym.LawOfSamples(stats.uniform(0, 0.1), seed=0),
...     lambda omega, x: x + omega,
... )
>>> traj, omegas = system.sample_trajectory(100, [0.2, 0.8], return_omegas=True)
>>> rdsym.empirical_average(rdsym.timeseries(traj, lambda x: x ** 2))
"""

from .analysis import (
    empirical_average,
    ensemble_average,
    random_timeseries,
    timeseries,
    trajectory_statistics,
)
from .distributions import LawOfSamples, normal_samples, sample_from_distribution
from .systems import (
    RDS,
    UNIT_INTERVAL,
    InvalidIterationCountError,
    PhaseSpaceDomainError,
    PhaseSpaceInterval,
    RandomDynamicalSystem,
    RDSDomain,
    ShapeMismatchError,
    ValidationError,
    replay_trajectory,
    sample_ensemble,
    sample_trajectory,
)

__version__ = "0.1.0"

__all__ = [
    "RandomDynamicalSystem",
    "RDS",
    "PhaseSpaceInterval",
    "RDSDomain",
    "UNIT_INTERVAL",
    "LawOfSamples",
    "sample_trajectory",
    "sample_ensemble",
    "replay_trajectory",
    "timeseries",
    "random_timeseries",
    "empirical_average",
    "ensemble_average",
    "trajectory_statistics",
    "sample_from_distribution",
    "normal_samples",
    "ValidationError",
    "InvalidIterationCountError",
    "PhaseSpaceDomainError",
    "ShapeMismatchError",
]
