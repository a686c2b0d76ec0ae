"""Exports for exporter modules."""

from . import text_exporter

__all__ = ["text_exporter"]
