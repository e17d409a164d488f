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
Sample Generation Helpers

Convenience routines producing samples normalised into the unit interval,
e.g. for initial state vectors spread over [0, 1].

These sit outside the sampling core: they never touch a random dynamical
system, they only shape draws from a law.
"""

import warnings
from numbers import Integral
from typing import Any, Optional

import numpy as np

from rdsym.types.config import DEFAULT_PRECISION_BITS

from .law_of_samples import LawOfSamples


def _check_count(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral) or n <= 0:
        raise ValueError(f"Number of samples must be a positive integer, got {n!r}")
    return int(n)


def sample_from_distribution(
    n: int,
    distribution: Any,
    high_precision: bool = False,
    normal_high_precision: bool = False,
    seed: Optional[int] = None,
    precision_bits: int = DEFAULT_PRECISION_BITS,
) -> np.ndarray:
    """
    Draw n samples and min-max normalise them into [0, 1].

    Parameters
    ----------
    n : int
        Number of samples to draw
    distribution : frozen scipy.stats distribution or LawOfSamples
        Source distribution. A ``LawOfSamples`` is used as-is unless one of
        the precision flags asks for a different law.
    high_precision : bool
        Draw at arbitrary precision through the inverse CDF of
        ``distribution``
    normal_high_precision : bool
        Ignore ``distribution`` and draw from a standard normal at arbitrary
        precision. Only consulted when ``high_precision`` is False.
    seed : Optional[int]
        Seed for the generator of a newly built law
    precision_bits : int
        Working precision for the arbitrary precision branches

    Returns
    -------
    np.ndarray
        Normalised samples in [0, 1]. The minimum maps to 0 and the maximum
        to 1. Values outside [0, 1] are dropped (this only happens through
        rounding). Object dtype at arbitrary precision.

    Warns
    -----
    UserWarning
        If all samples are equal (nothing can be normalised, the result is
        empty) or if samples were dropped by the final filter

    Examples
    --------
    >>> x0 = sample_from_distribution(50, stats.beta(2, 5), seed=0)
    >>> float(x0.min()), float(x0.max())
    (0.0, 1.0)
    """
    n = _check_count(n)

    if high_precision:
        source = distribution.distribution if isinstance(distribution, LawOfSamples) else distribution
        law = LawOfSamples(source, precision="arbitrary", precision_bits=precision_bits, seed=seed)
    elif normal_high_precision:
        law = LawOfSamples.high_precision_normal(bits=precision_bits, seed=seed)
    elif isinstance(distribution, LawOfSamples):
        law = distribution
    else:
        law = LawOfSamples(distribution, seed=seed)

    samples = law.draw(n)
    if samples.ndim != 1:
        raise ValueError(
            f"sample_from_distribution needs a one-dimensional sample space, "
            f"got samples of shape {samples.shape}"
        )

    with law.precision_context():
        lo = samples.min()
        hi = samples.max()
        if hi == lo:
            warnings.warn(
                f"All {n} samples are equal ({lo}); min-max normalisation is undefined. "
                f"Returning no samples.",
                UserWarning,
                stacklevel=2,
            )
            return np.array([], dtype=samples.dtype)

        transformed = (samples - lo) / (hi - lo)
        keep = np.array([0 <= t <= 1 for t in transformed], dtype=bool)

    if not keep.all():
        warnings.warn(
            f"Dropped {int((~keep).sum())} of {n} samples outside [0, 1] after normalisation.",
            UserWarning,
            stacklevel=2,
        )
    return transformed[keep]


def normal_samples(n: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Standard normal samples mapped by (z + 3) / 6 and clipped to [0, 1].

    Samples beyond three standard deviations fall outside [0, 1] and are
    discarded, so fewer than n values may come back.
    """
    n = _check_count(n)
    rng = np.random.default_rng(seed)
    transformed = (rng.standard_normal(n) + 3) / 6
    return transformed[(transformed >= 0) & (transformed <= 1)]
