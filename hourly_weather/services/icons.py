"""Classify National Weather Service icon URLs into weather-icons classes.

An NWS icon looks like ``https://api.weather.gov/icons/land/night/rain_showers,40/tsra?size=small``.
Only the first condition of the last path segment is used. Codes map either to
a suffix that is combined with the day/night prefix, or to a full class name
that has no day/night variant.
"""

DAY_PREFIX = "wi-day"
NIGHT_PREFIX = "wi-night"
FULL_CLASS_PREFIX = "wi-"

CONDITIONS: dict[str, str] = {
    "skc": "sunny",
    "few": "sunny",
    "sct": "sunny-overcast",
    "bkn": "sunny-overcast",
    "ovc": "cloudy",
    "wind_skc": "windy",
    "wind_few": "windy",
    "wind_sct": "cloudy-windy",
    "wind_bkn": "cloudy-windy",
    "wind_ovc": "cloudy-windy",
    "snow": "snow",
    "rain_snow": "rain-mix",
    "rain_sleet": "sleet",
    "snow_sleet": "sleet",
    "fzra": "rain-mix",
    "rain_fzra": "rain-mix",
    "snow_fzra": "rain-mix",
    "sleet": "sleet",
    "rain": "rain",
    "rain_showers": "showers",
    "rain_showers_hi": "showers",
    "tsra": "thunderstorm",
    "tsra_sct": "thunderstorm",
    "tsra_hi": "thunderstorm",
    "tornado": "wi-tornado",
    "hurricane": "wi-hurricane-warning",
    "tropical_storm": "wi-hurricane",
    "dust": "wi-dust",
    "smoke": "wi-smoke",
    "haze": "wi-haze",
    "hot": "wi-hot",
    "cold": "wi-cold",
    "blizzard": "snow-wind",
    "fog": "fog",
}

# Combinations that read wrong at night
CORRECTIONS: dict[str, str] = {
    "wi-night-sunny": "wi-night-clear",
    "wi-night-sunny-overcast": "wi-night-partly-cloudy",
}


def condition_code(icon: str | None) -> str:
    """Extract the first condition code from an icon URL or path."""
    if not icon:
        return ""
    last_segment = icon.rsplit("/", 1)[-1]
    return last_segment.split("?", 1)[0].split(",", 1)[0]


def classify(icon: str | None, is_daytime: bool) -> str:
    """Return the weather-icons class for an icon code; never raises."""
    prefix = DAY_PREFIX if is_daytime else NIGHT_PREFIX

    condition = CONDITIONS.get(condition_code(icon))
    if condition is None:
        return prefix
    if condition.startswith(FULL_CLASS_PREFIX):
        return condition

    result = f"{prefix}-{condition}"
    return CORRECTIONS.get(result, result)
