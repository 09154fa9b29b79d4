from datetime import datetime, timezone
from typing import Optional, Union


def parse_due_date(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        # fromisoformat only learned the "Z" suffix in 3.11
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(value: Union[str, datetime, None], tz=timezone.utc) -> str:
    """Render a due date as e.g. ``Dec 31, 2024``; empty values render as ``No due date``."""
    dt = parse_due_date(value)
    if dt is None:
        return "No due date"
    dt = dt.astimezone(tz)
    return f"{dt:%b} {dt.day}, {dt.year}"
