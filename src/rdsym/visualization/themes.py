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
Plotting Themes and Color Schemes

Color palettes and figure styling shared by the trajectory plots.

Main Classes
------------
ColorSchemes : Named color palettes
    PLOTLY : Default Plotly colors
    COLORBLIND_SAFE : Wong palette (colorblind accessible)
    SEQUENTIAL_BLUE : Blue gradient, used for step-indexed histograms

PlotThemes : Theme configurations
    DEFAULT : Plotly white
    PUBLICATION : Serif fonts, colorblind-safe colors
    DARK : Dark mode

Usage
-----
>>> from rdsym.visualization.themes import ColorSchemes, PlotThemes
>>> colors = ColorSchemes.get_colors('colorblind_safe', n_colors=3)
>>> fig = PlotThemes.apply_theme(plotter.plot_trajectory(traj), 'publication')
"""

from typing import Dict, List, Optional, Union

import plotly.graph_objects as go


class ColorSchemes:
    """
    Predefined color palettes for plotting.

    Examples
    --------
    >>> ColorSchemes.PLOTLY[0]
    '#636EFA'
    >>> ColorSchemes.get_colors('plotly', n_colors=12)[10]
    '#636EFA'
    """

    PLOTLY = [
        "#636EFA",  # Blue
        "#EF553B",  # Red
        "#00CC96",  # Green
        "#AB63FA",  # Purple
        "#FFA15A",  # Orange
        "#19D3F3",  # Cyan
        "#FF6692",  # Pink
        "#B6E880",  # Light green
        "#FF97FF",  # Light purple
        "#FECB52",  # Yellow
    ]

    COLORBLIND_SAFE = [
        "#0173B2",  # Blue
        "#DE8F05",  # Orange
        "#029E73",  # Green
        "#CC78BC",  # Pink
        "#CA9161",  # Tan
        "#949494",  # Gray
        "#ECE133",  # Yellow
        "#56B4E9",  # Sky blue
    ]

    SEQUENTIAL_BLUE = [
        "#deebf7",  # Lightest
        "#c6dbef",
        "#9ecae1",
        "#6baed6",
        "#4292c6",
        "#2171b5",
        "#08519c",
        "#08306b",  # Darkest
    ]

    _ALIASES = {
        "plotly": "PLOTLY",
        "colorblind_safe": "COLORBLIND_SAFE",
        "wong": "COLORBLIND_SAFE",
        "sequential_blue": "SEQUENTIAL_BLUE",
    }

    @classmethod
    def get_colors(cls, scheme: str = "plotly", n_colors: Optional[int] = None) -> List[str]:
        """
        Get a palette by name, cycling when more colors are requested.

        Raises
        ------
        ValueError
            If the scheme name is not recognized
        """
        key = scheme.lower().replace("-", "_").replace(" ", "_")
        if key not in cls._ALIASES:
            raise ValueError(
                f"Unknown color scheme '{scheme}'. Available: plotly, colorblind_safe, sequential_blue"
            )
        palette = getattr(cls, cls._ALIASES[key])

        if n_colors is None:
            return list(palette)
        return [palette[i % len(palette)] for i in range(n_colors)]

    @staticmethod
    def interpolate_colors(color1: str, color2: str, n_steps: int = 10) -> List[str]:
        """
        Linear gradient between two hex colors, endpoints included.

        >>> ColorSchemes.interpolate_colors('#000000', '#ffffff', 3)
        ['#000000', '#7f7f7f', '#ffffff']
        """
        start = [int(color1[i : i + 2], 16) for i in (1, 3, 5)]
        end = [int(color2[i : i + 2], 16) for i in (1, 3, 5)]

        colors = []
        for k in range(n_steps):
            t = k / (n_steps - 1) if n_steps > 1 else 0
            r, g, b = (int(a + (c - a) * t) for a, c in zip(start, end))
            colors.append(f"#{r:02x}{g:02x}{b:02x}")
        return colors


class PlotThemes:
    """
    Complete theme configurations applied with :meth:`apply_theme`.

    Custom themes are plain dicts with any of the keys below.
    """

    DEFAULT = {
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    PUBLICATION = {
        "template": "simple_white",
        "font_family": "Times New Roman, serif",
        "font_size": 14,
        "line_width": 2.5,
        "showlegend": True,
        "color_scheme": "colorblind_safe",
    }

    DARK = {
        "template": "plotly_dark",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    @classmethod
    def get_theme(cls, theme: Union[str, Dict]) -> Dict:
        if isinstance(theme, dict):
            return theme
        if not isinstance(theme, str):
            raise TypeError("theme must be str or dict")
        themes = {"default": cls.DEFAULT, "publication": cls.PUBLICATION, "dark": cls.DARK}
        try:
            return themes[theme.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown theme '{theme}'. Available: default, publication, dark"
            ) from None

    @classmethod
    def apply_theme(cls, fig: go.Figure, theme: Union[str, Dict] = "default") -> go.Figure:
        """
        Apply a theme to a Plotly figure in place and return it.

        Line traces are recolored when the theme names a color scheme;
        histogram and marker colors are left alone.
        """
        config = cls.get_theme(theme)

        if "template" in config:
            fig.update_layout(template=config["template"])

        font = {}
        if "font_family" in config:
            font["family"] = config["font_family"]
        if "font_size" in config:
            font["size"] = config["font_size"]
        if font:
            fig.update_layout(font=font)

        if "showlegend" in config:
            fig.update_layout(showlegend=config["showlegend"])

        line_traces = [trace for trace in fig.data if isinstance(trace, go.Scatter)]
        if "color_scheme" in config:
            colors = ColorSchemes.get_colors(config["color_scheme"], len(line_traces))
            for trace, color in zip(line_traces, colors):
                trace.line.color = color
        if "line_width" in config:
            for trace in line_traces:
                trace.line.width = config["line_width"]

        return fig
