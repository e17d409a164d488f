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
Distribution providers and sample generation helpers.
"""

from .law_of_samples import MPMATH_QUANTILES, LawOfSamples
from .sampling import normal_samples, sample_from_distribution

__all__ = [
    "LawOfSamples",
    "MPMATH_QUANTILES",
    "sample_from_distribution",
    "normal_samples",
]
