"""Expose widget host render functions."""

from .card_settings import card_settings
from .card_widget import card_widget

__all__ = [
    "card_settings",
    "card_widget",
]
