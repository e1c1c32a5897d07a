"""Fetch current conditions and the next-24h hourly forecast from Open-Meteo."""

import numpy as np
import pandas as pd
from loguru import logger

from randomweather.models import ForecastData, HourlyReading

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
VARIABLES = ["temperature_2m", "wind_speed_10m"]
FORECAST_HOURS = 24
# Same shape as the JSON API's local time strings with timezone=auto.
TIME_FORMAT = "%Y-%m-%dT%H:%M"


class WeatherClient:
    """One Open-Meteo forecast call per invocation, no internal retries."""

    def __init__(self, openmeteo, *, timeout: float = 10.0, url: str = FORECAST_URL):
        self.openmeteo = openmeteo
        self.timeout = timeout
        self.url = url

    def fetch_forecast(self, lat: float, lon: float) -> ForecastData | None:
        """
        Fetch current temperature/wind and the hourly series for (lat, lon).
        Returns None on any transport or API error, or when the current or
        hourly section is missing.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": VARIABLES,
            "hourly": VARIABLES,
            "timezone": "auto",
            "forecast_hours": FORECAST_HOURS,
        }
        try:
            responses = self.openmeteo.weather_api(self.url, params=params, timeout=self.timeout)
            response = responses[0]
            current = response.Current()
            hourly = response.Hourly()
            if current is None or hourly is None:
                logger.warning("Open-Meteo response lacks current or hourly data")
                return None

            return ForecastData(
                timezone=_text(response.Timezone()),
                temperature=_value(current.Variables(0).Value()),
                wind_speed=_value(current.Variables(1).Value()),
                hourly=_hourly_readings(hourly, response.UtcOffsetSeconds()),
            )
        except Exception as e:
            logger.warning("Weather fetch error: {}", e)
            return None


def _hourly_readings(hourly, utc_offset_seconds: int) -> tuple[HourlyReading, ...]:
    """Zip the time axis with the temperature and wind arrays, index by index."""
    offset = pd.Timedelta(seconds=utc_offset_seconds)
    times = pd.date_range(
        start=pd.to_datetime(hourly.Time(), unit="s") + offset,
        end=pd.to_datetime(hourly.TimeEnd(), unit="s") + offset,
        freq=pd.Timedelta(seconds=hourly.Interval()),
        inclusive="left",
    )
    temperatures = hourly.Variables(0).ValuesAsNumpy()
    wind_speeds = hourly.Variables(1).ValuesAsNumpy()
    n = min(len(times), len(temperatures), len(wind_speeds))

    df = pd.DataFrame(
        {
            "time": times[:n].strftime(TIME_FORMAT),
            "temperature": temperatures[:n],
            "wind_speed": wind_speeds[:n],
        }
    )
    return tuple(
        HourlyReading(time=row.time, temperature=_value(row.temperature), wind_speed=_value(row.wind_speed))
        for row in df.itertuples(index=False)
    )


def _value(raw) -> float | None:
    # FlatBuffers values are float32; round back to the API's 0.1 precision.
    if pd.isna(raw) or not np.isfinite(raw):
        return None
    return round(float(raw), 1)


def _text(raw) -> str:
    return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)
