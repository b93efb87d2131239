"""Service layer for the backronym application."""

from .expansion_service import BackronymService
from .result_formatter import ExpansionResultFormatter

__all__ = ["BackronymService", "ExpansionResultFormatter"]
