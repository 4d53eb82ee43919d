"""Console theme, status colours and rendering glyphs."""

from __future__ import annotations

CONSOLE_THEME = {
    "accent": "bold rgb(255,149,0)",
    "muted": "dim",
    "title": "bold rgb(120,200,255)",
    "pet": "bold rgb(222,184,135)",
    "label": "bold rgb(160,160,160)",
    "value": "rgb(240,240,240)",
    "success": "bold rgb(104,255,203)",
    "warning": "bold rgb(255,213,128)",
    "danger": "bold rgb(255,128,128)",
    "info": "rgb(120,200,255)",
    "xp": "bold rgb(255,215,0)",
    "divider": "rgb(85,85,85)",
    "frame": "rgb(112,141,242)",
}

STATUS_STYLES = {
    'great': 'success',
    'ok': 'info',
    'warning': 'warning',
    'bad': 'danger',
}

STATUS_ICONS = {
    'great': '✔',
    'ok': '●',
    'warning': '▲',
    'bad': '✖',
}

MOOD_STYLES = {
    'excited': 'xp',
    'happy': 'success',
    'neutral': 'value',
    'sad': 'warning',
    'sick': 'danger',
    'sleeping': 'muted',
}

# Heatmap intensity glyphs from zero commits upward
HEATMAP_GLYPHS = ('·', '░', '▒', '▓', '█')

BAR_CONFIG = {
    'width': 20,
    'filled': '█',
    'empty': '░',
}
