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
RDS Validator - Input and Shape Validation
==========================================

Validation helpers shared by the trajectory sampler and the time series
builders, together with the exception hierarchy they raise.

Validation Checks:
- Iteration count is a positive integer
- Initial state lies in the phase space
- Evolution mode is known
- Omega sequence aligns with a trajectory
- Trajectory states all have the same length

Errors raised by user update functions are never caught here; they reach
the caller unchanged.
"""

from numbers import Integral
from typing import Any, Sequence

import numpy as np

from rdsym.types.config import EVOLUTION_MODES

# ============================================================================
# Exceptions
# ============================================================================


class ValidationError(ValueError):
    """Base class for invalid inputs to random dynamical system routines."""

    pass


class InvalidIterationCountError(ValidationError):
    """
    Raised when the number of iterations is not a positive integer.

    Attributes
    ----------
    n : Any
        The offending iteration count
    """

    def __init__(self, n: Any):
        self.n = n
        super().__init__(f"The number of iterations, {n}, must be a positive integer.")


class PhaseSpaceDomainError(ValidationError):
    """
    Raised when an initial state coordinate lies outside the phase space.

    Attributes
    ----------
    x0 : Any
        The initial state vector
    value : Any
        First coordinate found outside the phase space
    """

    def __init__(self, x0: Any, value: Any, phase_space: Any = None):
        self.x0 = x0
        self.value = value
        self.phase_space = phase_space
        where = f" {phase_space}" if phase_space is not None else " M"
        super().__init__(
            f"Initial data vector, {np.asarray(x0).tolist()}, must be in phase space{where}, "
            f"but {value} is not in it."
        )


class ShapeMismatchError(ValidationError):
    """Raised when sequences that must align have incompatible lengths."""

    pass


# ============================================================================
# Validation Functions
# ============================================================================


def validate_iteration_count(n: Any) -> int:
    """
    Check that n is a positive integer and return it as ``int``.

    Booleans are rejected even though they are integers in Python.

    Raises
    ------
    InvalidIterationCountError
        If n is not an integer or n <= 0
    """
    if isinstance(n, bool) or not isinstance(n, Integral) or n <= 0:
        raise InvalidIterationCountError(n)
    return int(n)


def validate_initial_state(x0: Any, phase_space) -> np.ndarray:
    """
    Check that every coordinate of x0 lies in the phase space.

    Parameters
    ----------
    x0 : array-like
        Initial state, scalar or 1D sequence
    phase_space : PhaseSpaceInterval
        Interval providing ``contains``

    Returns
    -------
    np.ndarray
        Copy of x0 as a 1D array (object dtype is preserved for mpmath values)

    Raises
    ------
    ShapeMismatchError
        If x0 is empty or not one-dimensional
    PhaseSpaceDomainError
        If any coordinate is outside the phase space
    """
    x0_arr = np.array(x0, copy=True)
    if x0_arr.ndim == 0:
        x0_arr = x0_arr.reshape(1)
    if x0_arr.ndim != 1 or x0_arr.size == 0:
        raise ShapeMismatchError(
            f"Initial state must be a non-empty 1D vector, got shape {x0_arr.shape}"
        )

    for x in x0_arr:
        if not phase_space.contains(x):
            raise PhaseSpaceDomainError(x0_arr, x, phase_space)

    return x0_arr


def validate_mode(mode: str) -> str:
    """Check that mode is one of the supported evolution modes."""
    if mode not in EVOLUTION_MODES:
        raise ValueError(
            f"Unknown evolution mode '{mode}'. Available: {', '.join(EVOLUTION_MODES)}"
        )
    return mode


def validate_state_lengths(traj: Sequence[Sequence[Any]]) -> int:
    """
    Check that all states of a trajectory have the same number of coordinates.

    Returns
    -------
    int
        Common state length

    Raises
    ------
    ShapeMismatchError
        If the trajectory is empty or ragged
    """
    if len(traj) == 0:
        raise ShapeMismatchError("Trajectory must contain at least one state")

    width = len(traj[0])
    for k, state in enumerate(traj):
        if len(state) != width:
            raise ShapeMismatchError(
                f"State {k} has {len(state)} coordinates, expected {width} "
                f"(length of the initial state)"
            )
    return width


def validate_omega_alignment(traj: Sequence[Any], omegas: Sequence[Any]) -> None:
    """
    Check that there is exactly one ω per step of the trajectory.

    Raises
    ------
    ShapeMismatchError
        If len(omegas) != len(traj) - 1
    """
    if len(omegas) != len(traj) - 1:
        raise ShapeMismatchError(
            f"Expected {len(traj) - 1} omega values for a trajectory of "
            f"{len(traj)} states, got {len(omegas)}"
        )
