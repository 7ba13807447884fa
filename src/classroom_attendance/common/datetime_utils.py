from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.constants import DATE_KEY_FORMAT


def to_date_key(moment: date | datetime) -> str:
    """Calendar-day key (YYYY-MM-DD) for attendance documents.

    Aware datetimes are keyed by their UTC day; naive ones are taken as UTC.
    """
    if isinstance(moment, datetime) and moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(DATE_KEY_FORMAT)


def now_utc() -> datetime:
    """Current time in UTC.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)
