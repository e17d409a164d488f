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
Trajectory Result Types

TypedDict containers returned by the higher-level simulation entry points.
The plain sampler returns arrays; ``RandomDynamicalSystem.simulate`` wraps
them with metadata in the shapes below.

Shape Conventions
-----------------
- Single trajectory: (n_steps + 1, d), time-major
- Ensemble: (n_paths, n_steps + 1, d)
- Omegas (quenched): (n_steps,) or (n_steps, sample_space_dimension)
"""

from typing import Any, Dict, Optional

from typing_extensions import TypedDict

from .config import EvolutionMode
from .core import Ensemble, OmegaSequence, Trajectory


class RDSSimulationResult(TypedDict, total=False):
    """
    Result from simulating a random dynamical system.

    Attributes
    ----------
    states : Trajectory or Ensemble
        (n_steps + 1, d) for one path, (n_paths, n_steps + 1, d) otherwise
    omegas : Optional[OmegaSequence]
        Random parameters used in quenched single-path runs, else None
    time_steps : np.ndarray
        Step indices [0, 1, ..., n_steps]
    mode : EvolutionMode
        'quenched' or 'annealed'
    success : bool
        Whether the simulation completed
    metadata : Dict[str, Any]
        - 'n_steps': number of iterations
        - 'dimension': number of state coordinates
        - 'n_paths': number of trajectories
        - 'precision': precision of the law of samples
        - 'seed': seed of the law of samples, if any

    Examples
    --------
    >>> result = system.simulate(x0=[0.2, 0.8], n_steps=100)
    >>> result['states'].shape
    (101, 2)
    >>> result['omegas'].shape
    (100,)
    """

    states: Any
    omegas: Optional[OmegaSequence]
    time_steps: Any
    mode: EvolutionMode
    success: bool
    metadata: Dict[str, Any]


class TrajectoryStatistics(TypedDict, total=False):
    """
    Per-coordinate summary statistics of a trajectory.

    Attributes
    ----------
    mean : np.ndarray
        Empirical average, shape (d,)
    std : np.ndarray
        Standard deviation, shape (d,)
    min : np.ndarray
        Minimum over time, shape (d,)
    max : np.ndarray
        Maximum over time, shape (d,)
    n_states : int
        Number of states summarised
    """

    mean: Any
    std: Any
    min: Any
    max: Any
    n_states: int


__all__ = [
    "RDSSimulationResult",
    "TrajectoryStatistics",
    "Trajectory",
    "Ensemble",
]
