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
Random Dynamical System
=======================

Bundles the ingredients of a random dynamical system (RDS):

    (M, Ω₀, P, f)

- M: phase space, a closed interval (usually [0, 1])
- Ω₀: sample space of dimension ``sample_space_dimension``
- P: law of samples on Ω₀ (``LawOfSamples``)
- f: update function f(ω, x), ω FIRST

Iterating x[k+1] = f(ω[k+1], x[k]) mod 1 with i.i.d. ω[k] ~ P produces a
random trajectory in M. See :mod:`rdsym.systems.trajectory_sampler` for the
quenched and annealed evolution rules.

Construction checks types only. A function with the wrong arity or argument
order is accepted here and fails (or silently misbehaves) when called.

Examples
--------
Random rotation of the circle:

>>> from scipy import stats
>>> rotation = RandomDynamicalSystem(
...     PhaseSpaceInterval(0, 1),
...     1,
...     LawOfSamples(stats.uniform(0, 0.1), seed=42),
...     lambda omega, x: x + omega,
... )
>>> traj = rotation.sample_trajectory(100, [0.2, 0.8])
>>> traj.shape
(101, 2)

From a SymPy expression:

>>> w, x = sp.symbols('omega x', real=True)
>>> logistic = RandomDynamicalSystem.from_expression(
...     w * x * (1 - x), w, x, stats.uniform(3.6, 0.4)
... )
"""

from numbers import Integral
from typing import Any, Dict, Optional, Sequence, Union

import numpy as np
import sympy as sp

from rdsym.distributions.law_of_samples import LawOfSamples
from rdsym.types.config import EvolutionMode
from rdsym.types.core import Ensemble, StateVector, Trajectory, UpdateFunction
from rdsym.types.trajectories import RDSSimulationResult

from .phase_space import UNIT_INTERVAL, PhaseSpaceInterval
from .trajectory_sampler import replay_trajectory, sample_ensemble, sample_trajectory
from .utils.codegen_utils import generate_update_function


class RandomDynamicalSystem:
    """
    Random dynamical system on an interval phase space.

    Parameters
    ----------
    phase_space : PhaseSpaceInterval
        Domain M of every state coordinate
    sample_space_dimension : int
        Dimension of ω
    law : LawOfSamples or frozen scipy.stats distribution
        Law of ω. A bare scipy distribution is wrapped in a
        ``LawOfSamples`` of the given dimension.
    func : UpdateFunction
        f(ω, x) -> next coordinate value (before the modulo-1 wrap)

    Raises
    ------
    TypeError
        If phase_space is not a PhaseSpaceInterval, func is not callable or
        law is not a distribution
    ValueError
        If sample_space_dimension is not a positive integer or differs from
        the dimension of a given LawOfSamples

    Attributes
    ----------
    phase_space : PhaseSpaceInterval
    sample_space_dimension : int
    law : LawOfSamples
    func : UpdateFunction
    """

    def __init__(
        self,
        phase_space: PhaseSpaceInterval,
        sample_space_dimension: int,
        law: Any,
        func: UpdateFunction,
    ):
        if not isinstance(phase_space, PhaseSpaceInterval):
            raise TypeError(
                f"phase_space must be a PhaseSpaceInterval, got {type(phase_space).__name__}"
            )
        if (
            isinstance(sample_space_dimension, bool)
            or not isinstance(sample_space_dimension, Integral)
            or sample_space_dimension <= 0
        ):
            raise ValueError(
                f"sample_space_dimension must be a positive integer, got {sample_space_dimension!r}"
            )
        if not callable(func):
            raise TypeError(f"func must be callable f(omega, x), got {type(func).__name__}")

        if not isinstance(law, LawOfSamples):
            law = LawOfSamples(law, sample_space_dimension=sample_space_dimension)
        elif law.sample_space_dimension != sample_space_dimension:
            raise ValueError(
                f"Law of samples has dimension {law.sample_space_dimension}, "
                f"but the system declares sample_space_dimension={sample_space_dimension}"
            )

        self.phase_space = phase_space
        self.sample_space_dimension = int(sample_space_dimension)
        self.law = law
        self.func = func

    @classmethod
    def from_expression(
        cls,
        expr: sp.Expr,
        omega: Union[sp.Symbol, Sequence[sp.Symbol]],
        x: sp.Symbol,
        law: Any,
        phase_space: PhaseSpaceInterval = UNIT_INTERVAL,
        parameters: Optional[Dict[sp.Symbol, float]] = None,
    ) -> "RandomDynamicalSystem":
        """
        Build a system whose update function is compiled from SymPy.

        The sample space dimension is the number of omega symbols. When the
        law runs at arbitrary precision the expression is compiled for
        mpmath.
        """
        dim = 1 if isinstance(omega, sp.Symbol) else len(omega)
        if not isinstance(law, LawOfSamples):
            law = LawOfSamples(law, sample_space_dimension=dim)
        func = generate_update_function(expr, omega, x, parameters=parameters, precision=law.precision)
        return cls(phase_space, dim, law, func)

    # ========================================================================
    # Sampling
    # ========================================================================

    def sample_trajectory(
        self,
        n: int,
        x0: StateVector,
        mode: EvolutionMode = "quenched",
        return_omegas: bool = False,
    ):
        """Sample one trajectory. See :func:`trajectory_sampler.sample_trajectory`."""
        return sample_trajectory(self, n, x0, mode=mode, return_omegas=return_omegas)

    def sample_ensemble(
        self, n: int, x0: StateVector, n_paths: int, mode: EvolutionMode = "quenched"
    ) -> Ensemble:
        """Sample n_paths independent trajectories from x0."""
        return sample_ensemble(self, n, x0, n_paths, mode=mode)

    def replay(self, x0: StateVector, omegas: Sequence[Any]) -> Trajectory:
        """Rebuild the quenched trajectory produced by a recorded ω sequence."""
        return replay_trajectory(self, x0, omegas)

    def simulate(
        self,
        x0: StateVector,
        n_steps: int = 100,
        mode: EvolutionMode = "quenched",
        n_paths: int = 1,
    ) -> RDSSimulationResult:
        """
        Simulate the system and package the result with metadata.

        Parameters
        ----------
        x0 : StateVector
            Initial state
        n_steps : int
            Number of iterations
        mode : EvolutionMode
            'quenched' or 'annealed'
        n_paths : int
            Number of Monte Carlo paths (default: 1)

        Returns
        -------
        RDSSimulationResult
            - states: (n_steps+1, d) or (n_paths, n_steps+1, d)
            - omegas: ω sequence for a single quenched path, else None
            - time_steps: [0, 1, ..., n_steps]

        Examples
        --------
        >>> result = system.simulate([0.1, 0.5], n_steps=500, n_paths=20)
        >>> result['states'].shape
        (20, 501, 2)
        """
        omegas = None
        if n_paths == 1 and mode == "quenched":
            states, omegas = self.sample_trajectory(n_steps, x0, mode=mode, return_omegas=True)
        elif n_paths == 1:
            states = self.sample_trajectory(n_steps, x0, mode=mode)
        else:
            states = self.sample_ensemble(n_steps, x0, n_paths, mode=mode)

        return {
            "states": states,
            "omegas": omegas,
            "time_steps": np.arange(n_steps + 1),
            "mode": mode,
            "success": True,
            "metadata": {
                "n_steps": n_steps,
                "dimension": states.shape[-1],
                "n_paths": n_paths,
                "precision": self.law.precision,
                "seed": self.law.seed,
            },
        }

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", type(self.func).__name__)
        return (
            f"{self.__class__.__name__}(phase_space={self.phase_space}, "
            f"sample_space_dimension={self.sample_space_dimension}, "
            f"law={self.law!r}, func={name})"
        )


RDS = RandomDynamicalSystem
