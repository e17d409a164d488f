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
Random Dynamical Systems
========================

Phase space domains, the system model and the trajectory sampler.

>>> from rdsym.systems import RandomDynamicalSystem, PhaseSpaceInterval
>>> from rdsym.systems import sample_trajectory
"""

from .phase_space import UNIT_INTERVAL, PhaseSpaceInterval, RDSDomain
from .random_dynamical_system import RDS, RandomDynamicalSystem
from .trajectory_sampler import (
    apply_map,
    apply_map_coordinatewise,
    evolve_quenched,
    replay_trajectory,
    sample_ensemble,
    sample_trajectory,
    wrap_unit,
)
from .utils.rds_validator import (
    InvalidIterationCountError,
    PhaseSpaceDomainError,
    ShapeMismatchError,
    ValidationError,
)

__all__ = [
    # Domains
    "PhaseSpaceInterval",
    "RDSDomain",
    "UNIT_INTERVAL",
    # Model
    "RandomDynamicalSystem",
    "RDS",
    # Sampling
    "sample_trajectory",
    "sample_ensemble",
    "replay_trajectory",
    "evolve_quenched",
    "apply_map",
    "apply_map_coordinatewise",
    "wrap_unit",
    # Errors
    "ValidationError",
    "InvalidIterationCountError",
    "PhaseSpaceDomainError",
    "ShapeMismatchError",
]
