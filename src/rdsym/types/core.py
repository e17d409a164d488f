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
Core Types - Fundamental Building Blocks

Defines the most basic types used throughout the package:
- Scalar and vector types for phase space states and random parameters
- Trajectory and omega sequence aliases
- Function signatures for update maps and observables

Mathematical Context
--------------------
A random dynamical system on a phase space M is driven by i.i.d. draws
ω₁, ω₂, ... from a law P on the sample space Ω₀:

    x[k+1] = f(ω[k+1], x[k])  (mod 1)

The update function takes ω FIRST and the state coordinate SECOND.
Swapping the arguments silently changes the dynamics, so the contract is
spelled out as a Protocol below.

Usage
-----
>>> from rdsym.types.core import UpdateFunction, StateVector
>>>
>>> def rotation(omega, x):
...     return x + omega
>>>
>>> f: UpdateFunction = rotation
"""

from typing import Any, Callable, Sequence, Union

import numpy as np
from typing_extensions import Protocol

# ============================================================================
# Scalar and Vector Types
# ============================================================================

ScalarLike = Union[float, int, np.number, Any]
"""
Scalar value of a single state coordinate.

Plain Python floats and NumPy scalars in double precision, or ``mpmath.mpf``
values when the law of samples runs at arbitrary precision.
"""

StateVector = Union[np.ndarray, Sequence[ScalarLike]]
"""
State of the system: one scalar per coordinate.

Shape: (d,)

Each coordinate evolves under the same update function; the evolution
mode decides whether coordinates share ω within a step.
"""

Omega = Union[ScalarLike, np.ndarray]
"""
Single realization ω of the random parameter.

Scalar when the sample space dimension is 1, otherwise a vector of shape
(sample_space_dimension,).
"""

# ============================================================================
# Sequence Types
# ============================================================================

Trajectory = np.ndarray
"""
Sequence of states including the initial state.

Shape: (n_steps + 1, d)
- trajectory[0] is x0
- trajectory[k] is the state after k steps

Returned arrays are read-only.
"""

OmegaSequence = np.ndarray
"""
Random parameters drawn in quenched mode, one per step.

Shape: (n_steps,) or (n_steps, sample_space_dimension)

omegas[k - 1] produced trajectory[k].
"""

TimeSeries = np.ndarray
"""
Trajectory with an observable applied to every state except the first.

Shape: (n_steps + 1, d)
"""

Ensemble = np.ndarray
"""
Independent trajectories from the same initial state.

Shape: (n_paths, n_steps + 1, d)
"""

# ============================================================================
# Function Signatures
# ============================================================================


class UpdateFunction(Protocol):
    """
    Random map f_ω acting on a single state coordinate.

    Signature: f(omega, x) -> x_next

    The random parameter comes first. A function written as f(x, omega)
    still satisfies the protocol structurally, which is why builtin maps
    and :func:`rdsym.systems.utils.codegen_utils.generate_update_function`
    always produce ω-first callables.
    """

    def __call__(self, omega: Omega, x: ScalarLike) -> ScalarLike: ...


Observable = Callable[[ScalarLike], Any]
"""
Observable ϕ(x) applied to each coordinate of a state.

Examples
--------
>>> phi: Observable = lambda x: x ** 2
"""

RandomObservable = Callable[[Omega, ScalarLike], Any]
"""
Random observable ϕ_ω(x) applied with the ω that produced the state.

Same argument order as :class:`UpdateFunction`: ω first.
"""
