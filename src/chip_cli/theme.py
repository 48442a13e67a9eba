"""Console theming for Chip CLI."""

from typing import Optional, TextIO

from rich.console import Console
from rich.theme import Theme

CITY_LIGHTS_COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_muted': '#4F5B66',
    'text_bright': '#FFFFFF',
    'surface_light': '#41505E',
}

CHIP_THEME = Theme({
    'default': f"{CITY_LIGHTS_COLORS['accent']}",
    'muted': f"{CITY_LIGHTS_COLORS['text_muted']}",
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'header': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'primary': f"{CITY_LIGHTS_COLORS['primary']} bold",
    'border': f"{CITY_LIGHTS_COLORS['surface_light']}",
})


def get_themed_console(no_color: bool = False, file: Optional[TextIO] = None) -> Console:
    """Create a console using the Chip theme."""
    return Console(theme=CHIP_THEME, no_color=no_color, file=file, highlight=False)
