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
Utilities for random dynamical systems: validation and code generation.
"""

from .codegen_utils import generate_update_function
from .rds_validator import (
    InvalidIterationCountError,
    PhaseSpaceDomainError,
    ShapeMismatchError,
    ValidationError,
    validate_initial_state,
    validate_iteration_count,
    validate_mode,
    validate_omega_alignment,
    validate_state_lengths,
)

__all__ = [
    "ValidationError",
    "InvalidIterationCountError",
    "PhaseSpaceDomainError",
    "ShapeMismatchError",
    "validate_iteration_count",
    "validate_initial_state",
    "validate_mode",
    "validate_state_lengths",
    "validate_omega_alignment",
    "generate_update_function",
]
