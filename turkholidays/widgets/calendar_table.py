"""Calendar table widget showing the days of a month."""

from datetime import date

from rich.text import Text
from textual.widgets import DataTable

from turkholidays.models import DayRecord, DayType

DAY_TYPE_LABELS = {
    DayType.WORKING_DAY: "Working",
    DayType.WEEKEND: "Weekend",
    DayType.HOLIDAY: "Holiday",
    DayType.EXTRA_DAY_OFF: "Day off",
}

DAY_TYPE_STYLES = {
    DayType.WEEKEND: "blue",
    DayType.HOLIDAY: "red",
    DayType.EXTRA_DAY_OFF: "cyan",
}


class CalendarTable(DataTable):
    """Table displaying the monthly calendar with holidays."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cursor_type = "row"
        self.show_cursor = True
        self.zebra_stripes = True
        self.can_focus = True

    def on_mount(self) -> None:
        """Set up the table columns."""
        # Date format is "MM/DD (Day)" = 13 chars
        self.add_column("Date", width=13)
        self.add_column("Type", width=10)
        self.add_column("Holiday")

    def load_records(self, records: list[DayRecord], today: date | None = None) -> None:
        """Load day records into the table."""
        self.clear()
        if today is None:
            today = date.today()

        today_row_index = None

        for idx, record in enumerate(records):
            date_str = record.date.strftime("%m/%d")
            day_name = record.date.strftime("(%a)")[0:5]
            cells = (
                f"{date_str} {day_name}",
                DAY_TYPE_LABELS[record.day_type],
                record.holiday_name,
            )

            if record.date == today:
                style = "bold yellow"
                today_row_index = idx
            else:
                style = DAY_TYPE_STYLES.get(record.day_type)

            if style:
                self.add_row(
                    *(Text(cell, style=style) for cell in cells), key=record.date.isoformat()
                )
            else:
                self.add_row(*cells, key=record.date.isoformat())

        # Move cursor to today's row if found
        if today_row_index is not None and len(self.rows) > 0:
            self.move_cursor(row=today_row_index)
