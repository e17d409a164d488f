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
Trajectory Sampler
==================

Evolves an initial state vector under a random dynamical system.

Evolution Modes
---------------
**Quenched** (default):
    Draw ω₁, ..., ωₙ once, one per step. At step k every coordinate is
    updated with the same ωₖ:

        x[k][i] = f(ωₖ, x[k-1][i]) mod 1

**Annealed**:
    At every step draw a fresh ω per coordinate:

        x[k][j] = f(ωₖⱼ, x[k-1][j]) mod 1

Coordinates never interact; they only share (quenched) or do not share
(annealed) the environment.

Results are read-only NumPy arrays of shape (n + 1, d) with x0 at index 0.
Errors raised by the update function are not caught.
"""

from numbers import Integral
from typing import TYPE_CHECKING, Any, Sequence, Tuple, Union

import mpmath
import numpy as np

from rdsym.types.config import EvolutionMode
from rdsym.types.core import Ensemble, OmegaSequence, StateVector, Trajectory, UpdateFunction

from .utils.rds_validator import (
    ShapeMismatchError,
    validate_initial_state,
    validate_iteration_count,
    validate_mode,
)

if TYPE_CHECKING:
    from .random_dynamical_system import RandomDynamicalSystem


# ============================================================================
# Single-Step Helpers
# ============================================================================


def wrap_unit(value):
    """
    Reduce a value modulo 1 into [0, 1).

    Works for floats, NumPy scalars and mpmath values. Tiny negative floats
    can round to exactly 1.0 under ``% 1``; those are mapped to 0.
    """
    wrapped = value % 1
    if wrapped == 1:
        wrapped = wrapped - 1
    return wrapped


def apply_map(func: UpdateFunction, omega: Any, state: Sequence[Any]) -> list:
    """Apply f(ω, ·) mod 1 to every coordinate of a state with one shared ω."""
    return [wrap_unit(func(omega, x)) for x in state]


def apply_map_coordinatewise(
    func: UpdateFunction, omegas: Sequence[Any], state: Sequence[Any]
) -> list:
    """Apply f(ω_j, x_j) mod 1 with a separate ω for each coordinate."""
    if len(omegas) != len(state):
        raise ShapeMismatchError(
            f"Need one ω per coordinate: got {len(omegas)} for a state of length {len(state)}"
        )
    return [wrap_unit(func(omega, x)) for omega, x in zip(omegas, state)]


def _freeze(rows: list, high_precision: bool) -> np.ndarray:
    if high_precision:
        arr = np.empty((len(rows), len(rows[0])), dtype=object)
        for k, row in enumerate(rows):
            arr[k, :] = row
    else:
        arr = np.array(rows, dtype=float)
    arr.flags.writeable = False
    return arr


def _lift_precision(x0: np.ndarray, high_precision: bool) -> np.ndarray:
    if not high_precision:
        return x0
    lifted = np.empty(len(x0), dtype=object)
    lifted[:] = [mpmath.mpf(x) for x in x0]
    return lifted


def _freeze_omegas(omegas: np.ndarray) -> np.ndarray:
    omegas = np.array(omegas, copy=True)
    omegas.flags.writeable = False
    return omegas


# ============================================================================
# Sampling
# ============================================================================


def evolve_quenched(
    func: UpdateFunction,
    x0: Sequence[Any],
    omegas: Sequence[Any],
    high_precision: bool = False,
) -> Trajectory:
    """
    Deterministically evolve x0 with a given ω sequence (quenched rule).

    Parameters
    ----------
    func : UpdateFunction
        f(ω, x)
    x0 : array-like
        Initial state, used as-is (no phase space check)
    omegas : sequence
        ω₁, ..., ωₙ

    Returns
    -------
    Trajectory
        Read-only array of shape (len(omegas) + 1, len(x0))
    """
    current = list(x0)
    rows = [current]
    for omega in omegas:
        current = apply_map(func, omega, current)
        rows.append(current)
    return _freeze(rows, high_precision)


def sample_trajectory(
    system: "RandomDynamicalSystem",
    n: int,
    x0: StateVector,
    mode: EvolutionMode = "quenched",
    return_omegas: bool = False,
) -> Union[Trajectory, Tuple[Trajectory, OmegaSequence]]:
    """
    Sample a trajectory of length n + 1 starting from x0.

    Parameters
    ----------
    system : RandomDynamicalSystem
        Phase space, law of samples and update function
    n : int
        Number of iterations (positive)
    x0 : array-like
        Initial state; every coordinate must lie in the phase space
    mode : EvolutionMode
        'quenched' (shared ω per step) or 'annealed' (ω per coordinate)
    return_omegas : bool
        Also return the ω sequence. Quenched mode only.

    Returns
    -------
    Trajectory or (Trajectory, OmegaSequence)
        States of shape (n + 1, len(x0)); omegas of shape (n,) or
        (n, sample_space_dimension)

    Raises
    ------
    InvalidIterationCountError
        If n is not a positive integer
    PhaseSpaceDomainError
        If a coordinate of x0 lies outside the phase space
    ValueError
        For an unknown mode, or ``return_omegas`` in annealed mode

    Examples
    --------
    >>> system = RandomDynamicalSystem(UNIT_INTERVAL, 1, stats.uniform(0, 0.1),
    ...                                lambda w, x: x + w)
    >>> traj, omegas = sample_trajectory(system, 3, [0.2, 0.8], return_omegas=True)
    >>> traj.shape, omegas.shape
    ((4, 2), (3,))
    """
    n = validate_iteration_count(n)
    validate_mode(mode)
    x0_arr = validate_initial_state(x0, system.phase_space)
    if return_omegas and mode != "quenched":
        raise ValueError("Omega sequences are only returned in quenched mode")

    law = system.law
    func = system.func

    with law.precision_context():
        x0_arr = _lift_precision(x0_arr, law.is_high_precision)
        if mode == "quenched":
            omegas = law.draw(n)
            traj = evolve_quenched(func, x0_arr, omegas, law.is_high_precision)
        else:
            d = len(x0_arr)
            current = list(x0_arr)
            rows = [current]
            for _ in range(n):
                step_omegas = law.draw(d)
                current = apply_map_coordinatewise(func, step_omegas, current)
                rows.append(current)
            traj = _freeze(rows, law.is_high_precision)

    if return_omegas:
        return traj, _freeze_omegas(omegas)
    return traj


def sample_ensemble(
    system: "RandomDynamicalSystem",
    n: int,
    x0: StateVector,
    n_paths: int,
    mode: EvolutionMode = "quenched",
) -> Ensemble:
    """
    Sample independent trajectories from the same initial state.

    Each path draws its own random parameters from the system's law.

    Returns
    -------
    Ensemble
        Read-only array of shape (n_paths, n + 1, len(x0))

    Raises
    ------
    ValueError
        If n_paths is not a positive integer
    """
    if isinstance(n_paths, bool) or not isinstance(n_paths, Integral) or n_paths <= 0:
        raise ValueError(f"n_paths must be a positive integer, got {n_paths!r}")

    paths = [sample_trajectory(system, n, x0, mode=mode) for _ in range(n_paths)]
    ensemble = np.stack(paths)
    ensemble.flags.writeable = False
    return ensemble


def replay_trajectory(
    system: "RandomDynamicalSystem", x0: StateVector, omegas: Sequence[Any]
) -> Trajectory:
    """
    Rebuild a quenched trajectory from recorded ω values.

    Same validation of x0 as :func:`sample_trajectory`; the number of steps
    is ``len(omegas)``.
    """
    validate_iteration_count(len(omegas))
    x0_arr = validate_initial_state(x0, system.phase_space)
    with system.law.precision_context():
        x0_arr = _lift_precision(x0_arr, system.law.is_high_precision)
        return evolve_quenched(system.func, x0_arr, omegas, system.law.is_high_precision)
