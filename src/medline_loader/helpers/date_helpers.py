import logging
from datetime import date

from medline_loader.constants import DATE_FORMAT
from medline_loader.errors import DateCompositionError

logger = logging.getLogger(__name__)


def _to_int(part_name: str, value: str | None) -> int:
    if value is None:
        raise DateCompositionError(f"missing {part_name}")
    try:
        return int(value.strip())
    except ValueError:
        raise DateCompositionError(f"non-numeric {part_name}: {value!r}")


def compose_date(
    year: str | None, month: str | None, day: str | None, fmt: str = DATE_FORMAT
) -> str:
    """Build a calendar date from separate text parts and format it.

    The default format always yields a four-digit year (``0201-01-02``);
    ``strftime`` does not pad years below 1000 on every platform.

    Raises:
        DateCompositionError: a part is missing or non-numeric, or the parts
            do not name a real day (e.g. 2021-02-29).
    """
    parts = (
        _to_int("year", year),
        _to_int("month", month),
        _to_int("day", day),
    )
    try:
        value = date(*parts)
    except ValueError as e:
        raise DateCompositionError(f"invalid date {year}-{month}-{day}: {e}")
    if fmt == DATE_FORMAT:
        return value.isoformat()
    return value.strftime(fmt)


def compose_date_or_none(
    year: str | None, month: str | None, day: str | None
) -> str | None:
    """Like compose_date, but an unusable date comes back as None."""
    try:
        return compose_date(year, month, day)
    except DateCompositionError as e:
        logger.debug("Dropping date: %s", e)
        return None
