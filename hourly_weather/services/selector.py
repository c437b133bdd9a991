"""Pick the hours to display and attach day labels and fade tiers."""

from collections.abc import Sequence
from datetime import datetime, tzinfo

from ..models.forecast import DisplayRow, FadeTier, HourlyPeriod, as_aware
from .icons import classify


def day_label(start_time: datetime, tz: tzinfo | None = None) -> str:
    """Short weekday name for a start time, e.g. ``Mon``."""
    if tz is not None:
        start_time = start_time.astimezone(tz)
    return start_time.strftime("%a")


def fade_tier(index: int, count: int, fade_enabled: bool) -> FadeTier:
    """Fade the last two rows: second-to-last is dark, last is darker."""
    if not fade_enabled:
        return FadeTier.NONE
    if index == count - 1:
        return FadeTier.DARKER
    if index == count - 2:
        return FadeTier.DARK
    return FadeTier.NONE


def window(
    periods: Sequence[HourlyPeriod], now: datetime, max_hours: int, skip: int
) -> list[HourlyPeriod]:
    """Keep future periods inside the index window, every ``skip + 1``-th one.

    The bound applies to positions in ``periods``, not to the filtered
    result, and is inclusive: up to ``max_hours + 1`` periods can survive.
    """
    now = as_aware(now)
    step = max(skip, 0) + 1
    limit = max(max_hours, 0) * step

    return [
        period
        for i, period in enumerate(periods)
        if period.start_time > now and i <= limit and i % step == 0
    ]


def select(
    periods: Sequence[HourlyPeriod],
    now: datetime,
    max_hours: int,
    skip: int,
    fade_enabled: bool,
    tz: tzinfo | None = None,
) -> list[DisplayRow]:
    """Build the display rows for ``periods`` as of ``now``.

    Each weekday label is only shown on the first row it occurs in, even
    if other days come in between.
    """
    kept = window(periods, now, max_hours, skip)

    rows = []
    seen_days: set[str] = set()
    for i, period in enumerate(kept):
        day = day_label(period.start_time, tz)
        label = "" if day in seen_days else day
        seen_days.add(day)

        rows.append(
            DisplayRow(
                period=period,
                icon_class=period.weather_class or classify(period.icon, period.is_daytime),
                day_label=label,
                fade_tier=fade_tier(i, len(kept), fade_enabled),
            )
        )
    return rows
