"""Textual widgets."""

from .picker import PickerApp

__all__ = ["PickerApp"]
