"""
UI Theme configuration: colors and icons.
"""

from typing import Dict

THEME: Dict[str, str] = {
    # Session States
    "running": "#00ff88",  # Bright green
    "idle": "#666666",  # Gray
    "awaiting": "#ffaa00",  # Orange
    # Text Types
    "text": "#e6edf3",
    "muted": "#7d8590",
    "accent": "#00ccff",
    "success": "#00ff00",
    "error": "#f85149",
    "warning": "#d29922",
    "border": "#30363d",
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "warning": "⚠",
    "running": "●",
    "idle": "○",
}
