"""Helpers for the SORTKIT CLI."""

from .items import ordering, parse_number, read_items
from .messages import error, success, warn

__all__ = ["error", "ordering", "parse_number", "read_items", "success", "warn"]
