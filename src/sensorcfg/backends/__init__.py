"""Backends for rendering configuration data as text."""

from .table import EMPTY_LABEL, render_table

__all__ = ["EMPTY_LABEL", "render_table"]
