"""Summary panel widget showing monthly figures."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Static

from turkholidays.models import DayRecord, DayType, Holiday


class SummaryPanel(Container):
    """Panel displaying working days and the next holiday."""

    def compose(self) -> ComposeResult:
        """Compose the summary panel."""
        with Horizontal(id="summary-row"):
            with Vertical(classes="summary-box"):
                yield Static("Loading...", id="summary-working")
                yield Static("", id="summary-off")

            with Vertical(classes="summary-box"):
                yield Static("", id="summary-holidays")
                yield Static("", id="summary-next")

    def update_summary(self, records: list[DayRecord], upcoming: Holiday | None) -> None:
        """Update the displayed figures."""
        working = sum(1 for record in records if record.day_type == DayType.WORKING_DAY)
        holiday_names = sorted(
            {record.holiday_name for record in records if record.day_type == DayType.HOLIDAY}
        )

        self.query_one("#summary-working", Static).update(
            f"[bold]Working Days:[/bold] {working}"
        )
        self.query_one("#summary-off", Static).update(
            f"[bold]Days Off:[/bold] {len(records) - working}"
        )
        self.query_one("#summary-holidays", Static).update(
            f"[bold]Holidays:[/bold] {', '.join(holiday_names) or '--'}"
        )
        if upcoming is None:
            self.query_one("#summary-next", Static).update("[bold]Next:[/bold] --")
        else:
            self.query_one("#summary-next", Static).update(
                f"[bold]Next:[/bold] {upcoming.iso} {upcoming.name}"
            )

        self.refresh()
