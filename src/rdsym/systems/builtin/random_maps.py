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
Builtin Random Maps on the Unit Interval
========================================

Classical random maps, each defined symbolically and compiled with
``RandomDynamicalSystem.from_expression``. All act on M = [0, 1] with the
state wrapped modulo 1 after every step.

Maps
----
**Random rotation** (circle rotation by a random angle):
    x[k+1] = x[k] + ω  (mod 1)
    Default law: ω ~ Uniform(0, 1)

**Random logistic map** (environmental stochasticity in the growth rate):
    x[k+1] = ω·x[k]·(1 - x[k])
    Default law: ω ~ Uniform(3.6, 4.0)
    Values of ω above 4 push states out of [0, 1] before wrapping.

**Random β-transformation**:
    x[k+1] = ω·x[k]  (mod 1)
    Default law: ω ~ Uniform(1.5, 3.0)

**Noisy doubling map**:
    x[k+1] = 2·x[k] + ω  (mod 1)
    Default law: ω ~ Normal(0, 0.01)

Usage
-----
>>> system = random_logistic_map(seed=0)
>>> traj = system.sample_trajectory(200, [0.3, 0.31])
>>>
>>> system = make_random_map('rotation', stats.norm(0.1, 0.01), seed=3)
"""

from typing import Any, Callable, Dict, Optional, Tuple

import sympy as sp
from scipy import stats

from rdsym.distributions.law_of_samples import LawOfSamples
from rdsym.types.config import DEFAULT_PRECISION_BITS, Precision

from ..random_dynamical_system import RandomDynamicalSystem

OMEGA, X = sp.symbols("omega x", real=True)


def _rotation() -> sp.Expr:
    return X + OMEGA


def _logistic() -> sp.Expr:
    return OMEGA * X * (1 - X)


def _beta_transformation() -> sp.Expr:
    return OMEGA * X


def _noisy_doubling() -> sp.Expr:
    return 2 * X + OMEGA


BUILTIN_MAPS: Dict[str, Tuple[Callable[[], sp.Expr], Callable[[], Any]]] = {
    "rotation": (_rotation, lambda: stats.uniform(0, 1)),
    "logistic": (_logistic, lambda: stats.uniform(3.6, 0.4)),
    "beta_transformation": (_beta_transformation, lambda: stats.uniform(1.5, 1.5)),
    "noisy_doubling": (_noisy_doubling, lambda: stats.norm(0, 0.01)),
}


def make_random_map(
    name: str,
    distribution: Optional[Any] = None,
    seed: Optional[int] = None,
    precision: Precision = "double",
    precision_bits: int = DEFAULT_PRECISION_BITS,
) -> RandomDynamicalSystem:
    """
    Build one of the builtin random maps.

    Parameters
    ----------
    name : str
        One of 'rotation', 'logistic', 'beta_transformation', 'noisy_doubling'
    distribution : optional frozen scipy.stats distribution
        Law of ω; the map's default law when omitted
    seed : Optional[int]
        Seed of the law of samples
    precision : Precision
        'double' or 'arbitrary'
    precision_bits : int
        Working precision for arbitrary precision laws

    Raises
    ------
    ValueError
        For an unknown map name
    """
    if name not in BUILTIN_MAPS:
        raise ValueError(f"Unknown random map '{name}'. Available: {', '.join(BUILTIN_MAPS)}")

    expr_factory, default_distribution = BUILTIN_MAPS[name]
    if distribution is None:
        distribution = default_distribution()

    law = LawOfSamples(distribution, precision=precision, precision_bits=precision_bits, seed=seed)
    return RandomDynamicalSystem.from_expression(expr_factory(), OMEGA, X, law)


def random_rotation(
    distribution: Optional[Any] = None,
    seed: Optional[int] = None,
    precision: Precision = "double",
    precision_bits: int = DEFAULT_PRECISION_BITS,
) -> RandomDynamicalSystem:
    """Random rotation x ↦ x + ω (mod 1)."""
    return make_random_map(
        "rotation", distribution, seed=seed, precision=precision, precision_bits=precision_bits
    )


def random_logistic_map(
    distribution: Optional[Any] = None,
    seed: Optional[int] = None,
    precision: Precision = "double",
    precision_bits: int = DEFAULT_PRECISION_BITS,
) -> RandomDynamicalSystem:
    """Random logistic map x ↦ ω·x·(1 - x)."""
    return make_random_map(
        "logistic", distribution, seed=seed, precision=precision, precision_bits=precision_bits
    )


def random_beta_transformation(
    distribution: Optional[Any] = None,
    seed: Optional[int] = None,
    precision: Precision = "double",
    precision_bits: int = DEFAULT_PRECISION_BITS,
) -> RandomDynamicalSystem:
    """Random β-transformation x ↦ ω·x (mod 1)."""
    return make_random_map(
        "beta_transformation",
        distribution,
        seed=seed,
        precision=precision,
        precision_bits=precision_bits,
    )


def noisy_doubling_map(
    distribution: Optional[Any] = None,
    seed: Optional[int] = None,
    precision: Precision = "double",
    precision_bits: int = DEFAULT_PRECISION_BITS,
) -> RandomDynamicalSystem:
    """Doubling map with additive noise x ↦ 2x + ω (mod 1)."""
    return make_random_map(
        "noisy_doubling", distribution, seed=seed, precision=precision, precision_bits=precision_bits
    )
