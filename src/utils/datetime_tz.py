from __future__ import annotations

from datetime import date, datetime, time, timezone


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops tzinfo); convert aware ones."""
    if dt is None:
        return None
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_display_date(d: date | datetime | None, *, include_time: bool = False) -> str:
    """Return 'Fri, Oct 05 2026' or with time 'Fri, Oct 05 2026 14:30 UTC'."""
    if d is None:
        return ""
    if isinstance(d, datetime):
        dt = ensure_utc(d)
    else:
        dt = datetime.combine(d, time(0, 0), tzinfo=timezone.utc)
    text = dt.strftime("%a, %b %d %Y")
    if include_time:
        text = f"{text} {dt.strftime('%H:%M')} UTC"
    return text
