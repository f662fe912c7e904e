"""Utility functions."""

from .helpers import setup_logging, get_timestamp, format_probability
from .report_generator import render_report, save_report

__all__ = ["setup_logging", "get_timestamp", "format_probability", "render_report", "save_report"]
