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
Visualization Tools
===================

Plotly figures for trajectories of random dynamical systems.

>>> from rdsym.visualization import TrajectoryPlotter, PlotThemes
>>> plotter = TrajectoryPlotter()
>>> fig = plotter.plot_trajectory(traj)
>>> fig = PlotThemes.apply_theme(fig, 'dark')
"""

from .themes import ColorSchemes, PlotThemes
from .trajectory_plotter import TrajectoryPlotter

__all__ = [
    "TrajectoryPlotter",
    "ColorSchemes",
    "PlotThemes",
]
