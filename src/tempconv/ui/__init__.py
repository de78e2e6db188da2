"""Textual terminal widget for interactive conversions."""

from tempconv.ui.app import ConfirmScreen, ConverterApp

__all__ = ["ConfirmScreen", "ConverterApp"]
