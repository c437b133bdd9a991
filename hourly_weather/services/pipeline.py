"""Turn a forecast payload into display rows."""

import logging
from datetime import datetime, tzinfo

from ..models.config import ForecastConfig
from ..models.forecast import DisplayRow, ForecastPayload
from .precipitation import DEFAULT_PROBABILITY, annotate, parse_intervals
from .selector import select

logger = logging.getLogger(__name__)


def build_rows(
    payload: ForecastPayload,
    now: datetime,
    config: ForecastConfig,
    tz: tzinfo | None = None,
) -> list[DisplayRow]:
    """Match precipitation onto the hourly periods and select the rows to show.

    Only call this with a payload that was fetched successfully.

    Precipitation is resolved in one of three ways:

    - the payload carries interval records: every hour is matched against
      them and unmatched hours get 0;
    - the payload has no interval records but hours carry their own
      probability: those values are kept, missing ones stay unavailable;
    - neither: every hour gets 0.
    """
    periods = payload.hourly

    if payload.precipitation is not None:
        intervals = parse_intervals(payload.precipitation)
        logger.debug(
            f"Using {len(intervals)} of {len(payload.precipitation)} precipitation intervals"
        )
        periods = annotate(periods, intervals)
    elif not any(p.precipitation_probability is not None for p in periods):
        periods = [
            p.model_copy(update={"precipitation_probability": DEFAULT_PROBABILITY})
            for p in periods
        ]

    rows = select(
        periods,
        now,
        max_hours=config.max_hours_forecast,
        skip=config.skip_hours,
        fade_enabled=config.fade_forecast,
        tz=tz,
    )
    logger.debug(
        f"Filtered {len(periods)} hourly periods down to {len(rows)} "
        f"using max hours {config.max_hours_forecast} and skip {config.skip_hours}"
    )
    return rows
