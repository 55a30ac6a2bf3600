"""
LinguaScribe CLI Widgets
"""

from .output_panel import OutputPanel

__all__ = [
    "OutputPanel"
]
