"""Main Textual application."""

import logging
from datetime import date
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.widgets import Footer, Header, LoadingIndicator

from turkholidays.calculator import generate_month_calendar
from turkholidays.config import Config
from turkholidays.errors import TurkHolidaysError
from turkholidays.holidays import next_holiday
from turkholidays.models import DayRecord, Holiday
from turkholidays.widgets import CalendarTable, SummaryPanel

logger = logging.getLogger(__name__)


class TurkHolidaysApp(App):
    """Turkish holidays TUI application."""

    CSS = """
    #main-container {
        height: 100%;
    }

    Vertical {
        height: 100%;
    }

    #loading-indicator {
        layer: overlay;
        offset: 50% 50%;
        width: auto;
        height: auto;
        display: none;
    }

    #loading-indicator.visible {
        display: block;
    }

    #summary-panel {
        height: 1fr;
        padding: 1;
        background: $panel;
        border: solid $primary;
    }

    #summary-row {
        height: 100%;
        width: 100%;
    }

    .summary-box {
        width: 1fr;
        padding: 0 1;
    }

    #calendar-table {
        height: 4fr;
        border: solid $primary;
        width: 100%;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("c", "current_month", "Current Month"),
        ("n", "next_month", "Next Month"),
        ("b", "prev_month", "Prev Month"),
        ("?", "help", "Help"),
    ]

    def __init__(self, config: Config | None = None) -> None:
        super().__init__()
        self.config = config or Config()
        self.today = date.today()
        self.current_year = self.today.year
        self.current_month = self.today.month

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"), Vertical():
            yield LoadingIndicator(id="loading-indicator")
            yield SummaryPanel(id="summary-panel")
            yield CalendarTable(id="calendar-table")
        yield Footer()

    def on_mount(self) -> None:
        """Load the month when the app starts."""
        self.load_month()

    def load_month(self) -> None:
        """Start computing the selected month."""
        self.title = f"Türkiye Tatilleri - {self.current_year}/{self.current_month:02d}"
        loading = self.query_one("#loading-indicator", LoadingIndicator)
        loading.add_class("visible")
        self.run_worker(self._compute_and_update, exclusive=True, thread=True)

    def _compute_and_update(self) -> None:
        """Build the month calendar and find the next holiday."""
        try:
            records = generate_month_calendar(
                self.current_year, self.current_month, self.config.extra_days_off
            )
            upcoming = next_holiday(self.today)
        except TurkHolidaysError as e:
            logger.warning(
                "Cannot build calendar for %d/%d: %s", self.current_year, self.current_month, e
            )
            self.call_from_thread(self.notify, str(e), severity="error")
            self.call_from_thread(self._hide_loading)
            return

        self.call_from_thread(self._update_ui, records, upcoming)

    def _update_ui(self, records: list[DayRecord], upcoming: Holiday | None) -> None:
        """Update UI components (must run on main thread)."""
        summary_panel = self.query_one("#summary-panel", SummaryPanel)
        summary_panel.update_summary(records, upcoming)

        calendar_table = self.query_one("#calendar-table", CalendarTable)
        calendar_table.load_records(records, self.today)

        self._hide_loading()

        # Focus the table so it can receive keyboard input
        calendar_table.focus()

    def _hide_loading(self) -> None:
        loading = self.query_one("#loading-indicator", LoadingIndicator)
        loading.remove_class("visible")

    def action_next_month(self) -> None:
        """Navigate to next month."""
        self.current_month += 1
        if self.current_month > 12:
            self.current_month = 1
            self.current_year += 1
        self.load_month()

    def action_prev_month(self) -> None:
        """Navigate to previous month."""
        self.current_month -= 1
        if self.current_month < 1:
            self.current_month = 12
            self.current_year -= 1
        self.load_month()

    def action_current_month(self) -> None:
        """Navigate to current month."""
        self.today = date.today()
        self.current_year = self.today.year
        self.current_month = self.today.month
        self.load_month()

    def action_help(self) -> None:
        """Show help message."""
        help_text = """
        [bold]Türkiye Tatilleri - Keyboard Shortcuts[/bold]

        [cyan]q[/cyan] - Quit application
        [cyan]n[/cyan] / [cyan]b[/cyan] - Next / previous month
        [cyan]c[/cyan] - Current month
        [cyan]?[/cyan] - Show this help

        [bold]Colors:[/bold]
        • [red]red[/red] public holiday, [blue]blue[/blue] weekend
        • [cyan]cyan[/cyan] configured extra day off
        • Religious holiday dates are approximations
        """
        self.notify(help_text, title="Help", timeout=10)
