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
Law of Samples - Distribution Provider
======================================

Draws the i.i.d. random parameters ω that drive a random dynamical system.

A ``LawOfSamples`` wraps a frozen ``scipy.stats`` distribution together with
its own NumPy random generator, so every system owns a reproducible stream
of draws when a seed is given.

Precision
---------
**double** (default):
    Draws through ``distribution.rvs`` in float64.

**arbitrary**:
    Uniforms are assembled from raw generator bytes at ``precision_bits``
    bits and pushed through an mpmath inverse CDF. Only location-scale
    families with a closed-form quantile are supported:

    - uniform: loc + scale·u
    - norm: loc + scale·√2·erfinv(2u - 1)
    - expon: loc - scale·log(1 - u)
    - logistic: loc + scale·log(u / (1 - u))
    - cauchy: loc + scale·tan(π(u - 1/2))

Usage
-----
>>> from scipy import stats
>>> law = LawOfSamples(stats.uniform(0, 0.1), seed=42)
>>> law.draw(3).shape
(3,)
>>>
>>> hp = LawOfSamples.high_precision_normal(bits=256, seed=0)
>>> with hp.precision_context():
...     omegas = hp.draw(5)   # mpmath.mpf values
"""

import contextlib
import math
from numbers import Integral
from typing import Any, Callable, Dict, Optional

import mpmath
import numpy as np
from scipy import stats

from rdsym.types.config import DEFAULT_PRECISION_BITS, PRECISIONS, LawConfig, Precision

# ============================================================================
# Arbitrary Precision Quantiles
# ============================================================================


def _standard_uniform_ppf(u):
    return u


def _standard_norm_ppf(u):
    return mpmath.sqrt(2) * mpmath.erfinv(2 * u - 1)


def _standard_expon_ppf(u):
    return -mpmath.log(1 - u)


def _standard_logistic_ppf(u):
    return mpmath.log(u / (1 - u))


def _standard_cauchy_ppf(u):
    return mpmath.tan(mpmath.pi * (u - mpmath.mpf(1) / 2))


MPMATH_QUANTILES: Dict[str, Callable] = {
    "uniform": _standard_uniform_ppf,
    "norm": _standard_norm_ppf,
    "expon": _standard_expon_ppf,
    "logistic": _standard_logistic_ppf,
    "cauchy": _standard_cauchy_ppf,
}


class LawOfSamples:
    """
    Distribution of the random parameter ω.

    Parameters
    ----------
    distribution : frozen scipy.stats distribution
        Anything exposing ``rvs(size=..., random_state=...)``. Univariate
        distributions are drawn component-wise when
        ``sample_space_dimension > 1``; multivariate ones are drawn as-is.
    sample_space_dimension : int
        Dimension of ω (default 1)
    precision : Precision
        'double' or 'arbitrary'
    precision_bits : int
        Working precision for arbitrary precision draws (default 512)
    seed : Optional[int]
        Seed for ``np.random.default_rng``

    Raises
    ------
    TypeError
        If distribution has no ``rvs`` method
    ValueError
        For a non-positive dimension, an unknown precision, or arbitrary
        precision on an unsupported family

    Examples
    --------
    >>> law = LawOfSamples(stats.norm(0, 0.05), seed=1)
    >>> omegas = law.draw(100)
    >>> law.quantile(0.5)
    0.0
    """

    def __init__(
        self,
        distribution: Any,
        sample_space_dimension: int = 1,
        precision: Precision = "double",
        precision_bits: int = DEFAULT_PRECISION_BITS,
        seed: Optional[int] = None,
    ):
        if not callable(getattr(distribution, "rvs", None)):
            raise TypeError(
                f"distribution must be a frozen scipy.stats distribution, "
                f"got {type(distribution).__name__}"
            )
        if (
            isinstance(sample_space_dimension, bool)
            or not isinstance(sample_space_dimension, Integral)
            or sample_space_dimension <= 0
        ):
            raise ValueError(
                f"sample_space_dimension must be a positive integer, got {sample_space_dimension!r}"
            )
        if precision not in PRECISIONS:
            raise ValueError(
                f"Unknown precision '{precision}'. Available: {', '.join(PRECISIONS)}"
            )
        if isinstance(precision_bits, bool) or not isinstance(precision_bits, Integral) or precision_bits < 53:
            raise ValueError(f"precision_bits must be an integer >= 53, got {precision_bits!r}")

        self.distribution = distribution
        self.sample_space_dimension = int(sample_space_dimension)
        self.precision = precision
        self.precision_bits = int(precision_bits)
        self.seed = seed
        self._rng = np.random.default_rng(seed)

        if precision == "arbitrary" and not self.supports_arbitrary_precision():
            raise ValueError(
                f"Arbitrary precision sampling is not available for "
                f"'{self.family or type(distribution).__name__}'. "
                f"Supported families: {', '.join(MPMATH_QUANTILES)}"
            )

    # ========================================================================
    # Construction Helpers
    # ========================================================================

    @classmethod
    def from_config(cls, config: LawConfig) -> "LawOfSamples":
        """
        Build a law from a configuration dictionary.

        Examples
        --------
        >>> law = LawOfSamples.from_config({'distribution': stats.uniform(), 'seed': 3})
        """
        if "distribution" not in config:
            raise KeyError("LawConfig requires a 'distribution' entry")
        return cls(
            config["distribution"],
            sample_space_dimension=config.get("sample_space_dimension", 1),
            precision=config.get("precision", "double"),
            precision_bits=config.get("precision_bits", DEFAULT_PRECISION_BITS),
            seed=config.get("seed"),
        )

    @classmethod
    def high_precision_normal(
        cls, bits: int = DEFAULT_PRECISION_BITS, seed: Optional[int] = None
    ) -> "LawOfSamples":
        """Standard normal law drawn at arbitrary precision."""
        return cls(stats.norm(0, 1), precision="arbitrary", precision_bits=bits, seed=seed)

    def to_config(self) -> LawConfig:
        return {
            "distribution": self.distribution,
            "sample_space_dimension": self.sample_space_dimension,
            "precision": self.precision,
            "precision_bits": self.precision_bits,
            "seed": self.seed,
        }

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def family(self) -> Optional[str]:
        """scipy name of a univariate frozen distribution ('norm', 'uniform', ...)."""
        return getattr(getattr(self.distribution, "dist", None), "name", None)

    @property
    def is_univariate(self) -> bool:
        return self.family is not None

    @property
    def is_high_precision(self) -> bool:
        return self.precision == "arbitrary"

    def supports_arbitrary_precision(self) -> bool:
        """True when the distribution has an mpmath quantile in this module."""
        return self.family in MPMATH_QUANTILES

    def precision_context(self):
        """
        Context manager setting mpmath's working precision for this law.

        A no-op for double precision.
        """
        if self.is_high_precision:
            return mpmath.workprec(self.precision_bits)
        return contextlib.nullcontext()

    # ========================================================================
    # Sampling
    # ========================================================================

    def draw(self, count: int) -> np.ndarray:
        """
        Draw ``count`` i.i.d. samples of ω.

        Returns
        -------
        np.ndarray
            Shape (count,) when the sample space dimension is 1, else
            (count, sample_space_dimension). Object dtype holding
            ``mpmath.mpf`` values at arbitrary precision.
        """
        if isinstance(count, bool) or not isinstance(count, Integral) or count < 0:
            raise ValueError(f"count must be a non-negative integer, got {count!r}")

        d = self.sample_space_dimension
        shape = (count,) if d == 1 else (count, d)

        if self.is_high_precision:
            with self.precision_context():
                values = [self.quantile(self._uniform_mpf()) for _ in range(count * d)]
            samples = np.empty(count * d, dtype=object)
            samples[:] = values
            return samples.reshape(shape)

        if d == 1 or self.is_univariate:
            size = shape
        else:
            size = count
        samples = np.asarray(self.distribution.rvs(size=size, random_state=self._rng))
        return samples.reshape(shape)

    def draw_one(self):
        """Draw a single ω (scalar for one-dimensional sample spaces)."""
        return self.draw(1)[0]

    def quantile(self, u):
        """
        Inverse CDF of the law at u.

        At arbitrary precision u is converted to ``mpmath.mpf`` and the
        result is an ``mpf`` at the law's working precision.
        """
        if not self.is_high_precision:
            return self.distribution.ppf(u)

        loc, scale = self._loc_scale()
        with self.precision_context():
            standard = MPMATH_QUANTILES[self.family](mpmath.mpf(u))
            return mpmath.mpf(loc) + mpmath.mpf(scale) * standard

    def _loc_scale(self):
        args = getattr(self.distribution, "args", ())
        kwds = getattr(self.distribution, "kwds", {})
        loc = args[0] if len(args) > 0 else kwds.get("loc", 0.0)
        scale = args[1] if len(args) > 1 else kwds.get("scale", 1.0)
        return loc, scale

    def _uniform_mpf(self):
        # Midpoint of a random dyadic cell so that u is never exactly 0 or 1
        n_bytes = math.ceil(self.precision_bits / 8)
        k = int.from_bytes(self._rng.bytes(n_bytes), "big")
        return (mpmath.mpf(k) + mpmath.mpf(1) / 2) / mpmath.mpf(2) ** (8 * n_bytes)

    def __repr__(self) -> str:
        name = self.family or type(self.distribution).__name__
        return (
            f"LawOfSamples({name}, sample_space_dimension={self.sample_space_dimension}, "
            f"precision='{self.precision}')"
        )
