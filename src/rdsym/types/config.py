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
Configuration Types

Defines string literal types and configuration dictionaries for:
- Evolution semantics (quenched, annealed)
- Numerical precision of the law of samples

Usage
-----
>>> from rdsym.types.config import EvolutionMode, LawConfig
>>>
>>> mode: EvolutionMode = "annealed"
>>> config: LawConfig = {"precision": "arbitrary", "precision_bits": 256}
"""

from typing import Any, Literal, Optional

from typing_extensions import TypedDict

# ============================================================================
# Evolution Modes
# ============================================================================

EvolutionMode = Literal["quenched", "annealed"]
"""
How random parameters are shared across state coordinates.

Valid values:
- 'quenched': one ω per step, shared by every coordinate
- 'annealed': a fresh ω per coordinate per step

Examples
--------
>>> traj = sample_trajectory(system, 100, x0, mode="annealed")
"""

EVOLUTION_MODES = ("quenched", "annealed")

# ============================================================================
# Precision
# ============================================================================

Precision = Literal["double", "arbitrary"]
"""
Numerical precision of random draws.

Valid values:
- 'double': IEEE-754 float64 via scipy.stats
- 'arbitrary': mpmath floats at a configurable number of bits, drawn
  through the inverse CDF
"""

PRECISIONS = ("double", "arbitrary")

DEFAULT_PRECISION_BITS = 2**9


class LawConfig(TypedDict, total=False):
    """
    Configuration dictionary for a law of samples.

    Attributes
    ----------
    distribution : Any
        Frozen scipy.stats distribution (e.g. ``stats.uniform(0, 1)``)
    sample_space_dimension : int
        Dimension of ω (default 1)
    precision : Precision
        'double' or 'arbitrary'
    precision_bits : int
        Working precision in bits for arbitrary precision
    seed : Optional[int]
        Seed for the NumPy random generator

    Examples
    --------
    >>> config: LawConfig = {
    ...     'distribution': stats.norm(0, 0.1),
    ...     'precision': 'double',
    ...     'seed': 42,
    ... }
    >>> law = LawOfSamples.from_config(config)
    """

    distribution: Any
    sample_space_dimension: int
    precision: Precision
    precision_bits: int
    seed: Optional[int]
