"""Application wiring, services and UI for the backronym generator."""

from .app import BackronymApp, main

__all__ = ["BackronymApp", "main"]
