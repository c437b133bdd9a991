"""Match precipitation probability intervals onto hourly periods."""

import logging
import re
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from ..models.forecast import HourlyPeriod, PrecipitationInterval, RawPrecipitation, as_aware

logger = logging.getLogger(__name__)

# Probability used for hours no interval covers
DEFAULT_PROBABILITY = 0.0

# ISO-8601 durations as used by gridpoint data: PT3H, P1D, P1DT6H, PT30M
_DURATION_RE = re.compile(r"^P(?:(?P<days>\d+)D)?(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?)?$")


def parse_duration(text: str) -> timedelta | None:
    """Parse an ISO-8601 day/hour/minute duration, or return None."""
    match = _DURATION_RE.match(text.strip())
    if not match or not any(match.groupdict().values()):
        return None

    parts = {name: int(value) for name, value in match.groupdict().items() if value}
    try:
        return timedelta(**parts)
    except OverflowError:
        return None


def parse_valid_time(valid_time: str) -> tuple[datetime, datetime] | None:
    """Split ``start/duration`` into an inclusive (start, end) pair."""
    start_text, sep, duration_text = valid_time.partition("/")
    if not sep:
        return None

    try:
        start = as_aware(datetime.fromisoformat(start_text.strip()))
    except ValueError:
        return None

    duration = parse_duration(duration_text)
    if duration is None:
        return None

    try:
        return start, start + duration
    except OverflowError:
        return None


def parse_intervals(records: Iterable[RawPrecipitation]) -> list[PrecipitationInterval]:
    """Build matchable intervals, dropping records that cannot be parsed."""
    intervals = []
    for record in records:
        if record.value is None:
            logger.debug(f"Skipping precipitation record without value: {record.valid_time}")
            continue

        span = parse_valid_time(record.valid_time)
        if span is None:
            logger.debug(f"Skipping precipitation record with bad time span: {record.valid_time}")
            continue

        start, end = span
        intervals.append(PrecipitationInterval(start=start, end=end, value=record.value))
    return intervals


def find_precip(instant: datetime, intervals: Iterable[PrecipitationInterval]) -> float:
    """Return the value of the first interval containing ``instant``.

    Falls back to 0 when nothing matches. Overlapping intervals are not
    averaged; input order decides.
    """
    for interval in intervals:
        if interval.contains(instant):
            return interval.value
    return DEFAULT_PROBABILITY


def annotate(
    periods: Iterable[HourlyPeriod], intervals: Sequence[PrecipitationInterval]
) -> list[HourlyPeriod]:
    """Return copies of ``periods`` with their precipitation probability filled in."""
    return [
        period.model_copy(
            update={"precipitation_probability": find_precip(period.start_time, intervals)}
        )
        for period in periods
    ]
