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
Code Generation Utilities

Compiles SymPy expressions of random maps into numerical update functions
with the ω-first signature f(omega, x).

Backends:
- 'double': NumPy functions via lambdify
- 'arbitrary': mpmath functions via lambdify, so evaluation follows the
  working precision set by ``LawOfSamples.precision_context``
"""

from typing import Dict, Optional, Sequence, Union

import numpy as np
import sympy as sp

from rdsym.types.config import PRECISIONS, Precision
from rdsym.types.core import UpdateFunction

LAMBDIFY_MODULES = {
    "double": ["numpy"],
    "arbitrary": ["mpmath"],
}


def generate_update_function(
    expr: sp.Expr,
    omega: Union[sp.Symbol, Sequence[sp.Symbol]],
    x: sp.Symbol,
    parameters: Optional[Dict[sp.Symbol, float]] = None,
    precision: Precision = "double",
) -> UpdateFunction:
    """
    Generate an update function f(omega, x) from a SymPy expression.

    Args:
        expr: Scalar expression of the next coordinate value
        omega: Symbol for ω, or a sequence of symbols for vector ω
        x: Symbol for the state coordinate
        parameters: Numerical values substituted before compiling
        precision: 'double' (NumPy) or 'arbitrary' (mpmath)

    Returns:
        Callable taking ω first and the coordinate second. With a sequence of
        omega symbols, ω is passed as one sequence of matching length.

    Raises:
        TypeError: If expr is not a scalar SymPy expression
        ValueError: If expr has free symbols other than ω, x and parameters,
            or for an unknown precision

    Examples:
        >>> w, x = sp.symbols('omega x', real=True)
        >>> f = generate_update_function(x + w, w, x)
        >>> f(0.25, 0.5)
        0.75
    """
    if precision not in PRECISIONS:
        raise ValueError(f"Unknown precision '{precision}'. Available: {', '.join(PRECISIONS)}")

    expr = sp.sympify(expr)
    if isinstance(expr, sp.MatrixBase):
        raise TypeError("Update expressions act on one coordinate and must be scalar")

    if parameters:
        expr = expr.subs(parameters)

    is_vector_omega = not isinstance(omega, sp.Symbol)
    omega_symbols = list(omega) if is_vector_omega else [omega]

    unbound = expr.free_symbols - set(omega_symbols) - {x}
    if unbound:
        names = ", ".join(sorted(str(s) for s in unbound))
        raise ValueError(f"Update expression has unbound symbols: {names}")

    func = sp.lambdify(omega_symbols + [x], expr, modules=LAMBDIFY_MODULES[precision])
    n_omega = len(omega_symbols)

    def update(omega_value, x_value):
        if is_vector_omega:
            if len(omega_value) != n_omega:
                raise ValueError(f"Expected ω of length {n_omega}, got {len(omega_value)}")
            result = func(*omega_value, x_value)
        else:
            result = func(omega_value, x_value)

        if isinstance(result, np.ndarray) and result.ndim == 0:
            return result.item()
        return result

    update.expression = expr
    return update
