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
Observables and Empirical Statistics
====================================

Derived quantities of sampled trajectories.

Time Series
-----------
Given a trajectory x[0], ..., x[n] and an observable ϕ, the time series is

    x[0], ϕ(x[1]), ..., ϕ(x[n])

with ϕ applied to every coordinate. The initial state passes through
unchanged. A random observable ϕ_ω additionally receives the ω that produced
each state:

    x[0], ϕ_{ω₁}(x[1]), ..., ϕ_{ωₙ}(x[n])

Averages
--------
- ``empirical_average``: time average per coordinate, (1/(n+1)) Σₖ x[k]
- ``ensemble_average``: average over independent paths at every step, an
  estimate of the expectation of the state (or of a random observable)

Usage
-----
>>> traj, omegas = system.sample_trajectory(1000, x0, return_omegas=True)
>>> squares = timeseries(traj, lambda x: x ** 2)
>>> shifted = timeseries(traj, omegas, lambda w, x: x - w)
>>> empirical_average(squares)
"""

from numbers import Real
from typing import Any, Sequence

import numpy as np

from rdsym.systems.utils.rds_validator import (
    ShapeMismatchError,
    validate_omega_alignment,
    validate_state_lengths,
)
from rdsym.types.core import Ensemble, Observable, RandomObservable, TimeSeries
from rdsym.types.trajectories import TrajectoryStatistics


def _is_real_scalar(value: Any) -> bool:
    return isinstance(value, (Real, np.integer, np.floating, np.bool_))


def _pack(rows: list) -> np.ndarray:
    # Numeric dtype only when the observable kept every value a real scalar;
    # otherwise an object array, so rows[0] is stored as given
    initial = np.asarray(rows[0])
    numeric = initial.dtype.kind in "biuf" and all(
        _is_real_scalar(value) for row in rows[1:] for value in row
    )
    if numeric:
        arr = np.array(rows)
    else:
        arr = np.empty((len(rows), len(rows[0])), dtype=object)
        for k, row in enumerate(rows):
            for j, value in enumerate(row):
                arr[k, j] = value
    arr.flags.writeable = False
    return arr


# ============================================================================
# Time Series
# ============================================================================


def timeseries(traj: Sequence[Sequence[Any]], *args) -> TimeSeries:
    """
    Apply an observable to a trajectory.

    Two call forms:

    - ``timeseries(traj, phi)``: phi(x) on every coordinate of every state
      after the first
    - ``timeseries(traj, omegas, phi_omega)``: phi_omega(ω, x) using the ω
      that produced each state (see :func:`random_timeseries`)

    Returns
    -------
    TimeSeries
        Read-only array aligned 1:1 with traj; index 0 equals traj[0]

    Raises
    ------
    TypeError
        For any other number of arguments
    ShapeMismatchError
        If states have different lengths, or omegas do not align
    """
    if len(args) == 1:
        (observable,) = args
        return observable_timeseries(traj, observable)
    if len(args) == 2:
        omegas, random_observable = args
        return random_timeseries(traj, omegas, random_observable)
    raise TypeError(
        f"timeseries() takes (traj, phi) or (traj, omegas, phi_omega), "
        f"got {len(args) + 1} arguments"
    )


def observable_timeseries(traj: Sequence[Sequence[Any]], observable: Observable) -> TimeSeries:
    """Time series x[0], ϕ(x[1]), ..., ϕ(x[n]) with ϕ applied coordinate-wise."""
    validate_state_lengths(traj)
    rows = [list(traj[0])]
    for state in traj[1:]:
        rows.append([observable(x) for x in state])
    return _pack(rows)


def random_timeseries(
    traj: Sequence[Sequence[Any]],
    omegas: Sequence[Any],
    random_observable: RandomObservable,
) -> TimeSeries:
    """
    Time series of a random observable.

    For k >= 1 every coordinate of traj[k] is mapped through
    ``random_observable(omegas[k - 1], x)``.

    Raises
    ------
    ShapeMismatchError
        If len(omegas) != len(traj) - 1 or states have different lengths
    """
    validate_state_lengths(traj)
    validate_omega_alignment(traj, omegas)

    rows = [list(traj[0])]
    for k in range(1, len(traj)):
        omega = omegas[k - 1]
        rows.append([random_observable(omega, x) for x in traj[k]])
    return _pack(rows)


# ============================================================================
# Averages
# ============================================================================


def empirical_average(traj: Sequence[Sequence[Any]]) -> np.ndarray:
    """
    Per-coordinate mean over all states of a trajectory or time series.

    Returns
    -------
    np.ndarray
        Shape (d,); element j is the mean of traj[k][j] over k

    Raises
    ------
    ShapeMismatchError
        If the trajectory is empty or its states have different lengths

    Examples
    --------
    >>> empirical_average([[0.5, 0.5]] * 4)
    array([0.5, 0.5])
    """
    width = validate_state_lengths(traj)

    totals = [0] * width
    for state in traj:
        for j in range(width):
            totals[j] += state[j]
    return np.array([total / len(traj) for total in totals])


def ensemble_average(ensemble: Ensemble) -> np.ndarray:
    """
    Mean over paths at every step.

    Parameters
    ----------
    ensemble : array-like
        Shape (n_paths, n_steps + 1, d), e.g. from ``sample_ensemble`` or a
        stack of time series

    Returns
    -------
    np.ndarray
        Shape (n_steps + 1, d)
    """
    arr = np.asarray(ensemble)
    if arr.ndim != 3 or arr.shape[0] == 0:
        raise ShapeMismatchError(
            f"Ensemble must have shape (n_paths, n_steps + 1, d), got {arr.shape}"
        )
    return arr.sum(axis=0) / arr.shape[0]


def trajectory_statistics(traj: Sequence[Sequence[Any]]) -> TrajectoryStatistics:
    """Mean, standard deviation, minimum and maximum per coordinate (float64)."""
    validate_state_lengths(traj)
    arr = np.asarray(traj, dtype=float)
    return {
        "mean": arr.mean(axis=0),
        "std": arr.std(axis=0),
        "min": arr.min(axis=0),
        "max": arr.max(axis=0),
        "n_states": arr.shape[0],
    }
