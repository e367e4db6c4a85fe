"""Calendar date parsing for shipment dates."""

from datetime import datetime

# Tried in order after ISO-8601. "%x" is the host locale's date layout.
DATE_FORMATS = (
    "%x",
    "%Y/%m/%d",
    "%d/%m/%Y",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%d.%m.%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)


def parse_calendar_date(value: str) -> datetime | None:
    """
    Parse a shipment date literal.

    Args:
        value: Date text as found in the file (e.g., '2024-10-12').

    Returns:
        Naive local datetime, or None if the text is not a calendar date.
    """
    value = value.strip()
    if not value:
        return None

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        parsed = None

    if parsed is None:
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue

    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
