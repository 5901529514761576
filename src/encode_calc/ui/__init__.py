"""UI components for encode_calc.

This module provides Rich-based components for showing calculation
results, usage help and the in-memory session log.
"""

from __future__ import annotations

from encode_calc.ui.panels import (
    display_help,
    display_history,
    display_intro,
    display_result,
)

__all__ = [
    "display_help",
    "display_history",
    "display_intro",
    "display_result",
]
