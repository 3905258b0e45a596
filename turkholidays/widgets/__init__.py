"""Textual widgets for the TUI."""

from turkholidays.widgets.calendar_table import CalendarTable
from turkholidays.widgets.summary_panel import SummaryPanel

__all__ = ["CalendarTable", "SummaryPanel"]
