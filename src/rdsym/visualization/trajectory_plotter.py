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
Trajectory Plotter - Random Trajectory Visualization

Plotly-based views of sampled trajectories.

Key Features
------------
- Line plot of every coordinate against the iteration index
- Distribution tracking: animated histogram of all coordinates, one frame
  per step, on the fixed range [0, 1]
- Law comparison: the same initial state and map under several laws

Figures are returned and never shown; call ``fig.show()`` or
``fig.write_html(...)`` explicitly.

Usage
-----
>>> plotter = TrajectoryPlotter()
>>> traj = system.sample_trajectory(200, x0)
>>> fig = plotter.plot_trajectory(traj, title='Random rotation')
>>> fig.show()
>>>
>>> x0 = sample_from_distribution(500, stats.beta(2, 5), seed=0)
>>> fig = plotter.plot_tracking(system.sample_trajectory(30, x0))
"""

from typing import Any, List, Optional, Sequence, Union

import numpy as np
import plotly.graph_objects as go

from rdsym.distributions.law_of_samples import LawOfSamples
from rdsym.systems.phase_space import UNIT_INTERVAL, PhaseSpaceInterval
from rdsym.systems.random_dynamical_system import RandomDynamicalSystem
from rdsym.types.config import EvolutionMode
from rdsym.types.core import StateVector, UpdateFunction

from .themes import ColorSchemes, PlotThemes


class TrajectoryPlotter:
    """
    Visualization of trajectories and time series of random dynamical systems.

    Parameters
    ----------
    theme : str or dict
        Theme applied to every figure ('default', 'publication', 'dark')
    color_scheme : str
        Palette for coordinate lines

    Examples
    --------
    >>> plotter = TrajectoryPlotter(theme='publication')
    >>> fig = plotter.plot_trajectory(traj, state_names=['x₁', 'x₂'])
    """

    def __init__(self, theme: Union[str, dict] = "default", color_scheme: str = "plotly"):
        PlotThemes.get_theme(theme)
        ColorSchemes.get_colors(color_scheme)
        self.theme = theme
        self.color_scheme = color_scheme

    # =========================================================================
    # Main Plotting Methods
    # =========================================================================

    def plot_trajectory(
        self,
        traj: Any,
        title: str = "Sample Trajectory",
        state_names: Optional[Sequence[str]] = None,
        show_markers: bool = False,
    ) -> go.Figure:
        """
        Plot every coordinate of a trajectory against the iteration index.

        Parameters
        ----------
        traj : array-like
            Trajectory or time series, shape (n_steps + 1, d)
        title : str
            Figure title
        state_names : Optional[Sequence[str]]
            One legend entry per coordinate, default 'x₀[i]'
        show_markers : bool
            Draw markers at every step in addition to lines

        Returns
        -------
        go.Figure
            One Scatter trace per coordinate
        """
        x = self._to_numpy(traj)
        n_states, d = x.shape

        if state_names is None:
            state_names = [f"x₀[{i}]" for i in range(d)]
        elif len(state_names) != d:
            raise ValueError(f"Expected {d} state names, got {len(state_names)}")

        colors = ColorSchemes.get_colors(self.color_scheme, d)
        steps = np.arange(n_states)

        fig = go.Figure()
        for i in range(d):
            fig.add_trace(
                go.Scatter(
                    x=steps,
                    y=x[:, i],
                    mode="lines+markers" if show_markers else "lines",
                    name=state_names[i],
                    line=dict(color=colors[i], width=2),
                )
            )

        fig.update_layout(
            title=dict(text=title, font=dict(size=14)),
            xaxis_title="Iterations",
            yaxis_title="Values",
            hovermode="x unified",
        )
        return PlotThemes.apply_theme(fig, self.theme)

    def plot_tracking(
        self,
        traj: Any,
        n_bins: int = 20,
        title: str = "Distribution of States",
    ) -> go.Figure:
        """
        Animated histogram of the population of coordinates at each step.

        Every step of the trajectory becomes one animation frame showing the
        histogram of all d coordinate values at that step. The x-axis is
        fixed to [0, 1].

        Parameters
        ----------
        traj : array-like
            Trajectory of shape (n_steps + 1, d), typically with large d
            (e.g. initial data from ``sample_from_distribution``)
        n_bins : int
            Number of equal-width bins on [0, 1]

        Returns
        -------
        go.Figure
            Figure with n_steps + 1 frames and a step slider
        """
        if n_bins <= 0:
            raise ValueError(f"n_bins must be positive, got {n_bins}")

        x = self._to_numpy(traj)
        n_states = x.shape[0]
        bins = dict(start=0.0, end=1.0, size=1.0 / n_bins)
        shades = ColorSchemes.get_colors("sequential_blue")
        colors = ColorSchemes.interpolate_colors(shades[2], shades[-1], n_states)

        def histogram(k: int) -> go.Histogram:
            return go.Histogram(
                x=x[k],
                xbins=bins,
                marker=dict(color=colors[k]),
                name=f"Step {k}",
            )

        frames = [go.Frame(data=[histogram(k)], name=str(k)) for k in range(n_states)]

        slider_steps = [
            dict(
                method="animate",
                label=str(k),
                args=[[str(k)], dict(mode="immediate", frame=dict(duration=0, redraw=True))],
            )
            for k in range(n_states)
        ]

        fig = go.Figure(data=[histogram(0)], frames=frames)
        fig.update_layout(
            title=title,
            xaxis=dict(title="Values", range=[0, 1]),
            yaxis=dict(title="Count"),
            sliders=[dict(active=0, currentvalue=dict(prefix="Step: "), steps=slider_steps)],
            updatemenus=[
                dict(
                    type="buttons",
                    showactive=False,
                    buttons=[
                        dict(
                            label="Play",
                            method="animate",
                            args=[None, dict(frame=dict(duration=300, redraw=True), fromcurrent=True)],
                        )
                    ],
                )
            ],
        )
        return PlotThemes.apply_theme(fig, self.theme)

    def plot_law_comparison(
        self,
        x0: StateVector,
        laws: Sequence[Any],
        func: UpdateFunction,
        n_steps: int,
        mode: EvolutionMode = "quenched",
        phase_space: PhaseSpaceInterval = UNIT_INTERVAL,
    ) -> List[go.Figure]:
        """
        Sample the same map from the same x0 under several laws.

        Parameters
        ----------
        x0 : StateVector
            Initial state shared by all runs
        laws : Sequence
            ``LawOfSamples`` instances or frozen scipy distributions
        func : UpdateFunction
            f(ω, x)
        n_steps : int
            Number of iterations

        Returns
        -------
        List[go.Figure]
            One trajectory figure per law, titled with the law
        """
        figures = []
        for law in laws:
            if not isinstance(law, LawOfSamples):
                law = LawOfSamples(law)
            system = RandomDynamicalSystem(phase_space, law.sample_space_dimension, law, func)
            traj = system.sample_trajectory(n_steps, x0, mode=mode)
            figures.append(self.plot_trajectory(traj, title=repr(law)))
        return figures

    # =========================================================================
    # Helper Methods (Internal)
    # =========================================================================

    def _to_numpy(self, traj: Any) -> np.ndarray:
        """Convert a trajectory (possibly of mpmath values) to a float 2D array."""
        x = np.array(traj, dtype=float)
        if x.ndim != 2:
            raise ValueError(
                f"Expected a trajectory of shape (n_steps + 1, d), got shape {x.shape}"
            )
        return x
