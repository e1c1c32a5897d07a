import json
from unittest.mock import MagicMock

import numpy as np
import pytest

from randomweather.cities import CityStore
from randomweather.models import CityRecord, ForecastData, HourlyReading, ResolvedLocation

TESTVILLE = CityRecord(name="Testville", country="Test Country", latitude=10.0, longitude=20.0, population=1000)


def make_forecast(hours: int = 24, temperature: float = 15.0, wind_speed: float = 5.0) -> ForecastData:
    return ForecastData(
        timezone="GMT",
        temperature=temperature,
        wind_speed=wind_speed,
        hourly=tuple(
            HourlyReading(time=f"2024-01-01T{h % 24:02d}:00", temperature=float(h), wind_speed=float(h) / 2)
            for h in range(hours)
        ),
    )


class FakeGeocoder:
    """Returns queued results in order, then repeats the last one."""

    def __init__(self, *results):
        self.results = list(results) or [ResolvedLocation("Testville, Test Country", "Test Country")]
        self.calls = []

    def reverse_geocode(self, lat, lon):
        self.calls.append((lat, lon))
        index = min(len(self.calls), len(self.results)) - 1
        return self.results[index]


class FakeWeather:
    def __init__(self, *results):
        self.results = list(results) or [make_forecast()]
        self.calls = []

    def fetch_forecast(self, lat, lon):
        self.calls.append((lat, lon))
        index = min(len(self.calls), len(self.results)) - 1
        return self.results[index]


def openmeteo_response(
    *,
    temperature=15.0,
    wind_speed=5.0,
    start=1704067200,
    hours=24,
    interval=3600,
    utc_offset=0,
    timezone=b"GMT",
    hourly_temperatures=None,
    hourly_wind_speeds=None,
    current=True,
    hourly=True,
):
    """MagicMock shaped like an openmeteo_sdk WeatherApiResponse."""
    response = MagicMock()
    response.Timezone.return_value = timezone
    response.UtcOffsetSeconds.return_value = utc_offset

    if current:
        current_vars = [MagicMock(), MagicMock()]
        current_vars[0].Value.return_value = temperature
        current_vars[1].Value.return_value = wind_speed
        response.Current.return_value.Variables.side_effect = lambda i: current_vars[i]
    else:
        response.Current.return_value = None

    if hourly:
        temps = np.array(hourly_temperatures if hourly_temperatures is not None else range(hours), dtype=np.float32)
        winds = np.array(
            hourly_wind_speeds if hourly_wind_speeds is not None else [h / 2 for h in range(hours)],
            dtype=np.float32,
        )
        hourly_vars = [MagicMock(), MagicMock()]
        hourly_vars[0].ValuesAsNumpy.return_value = temps
        hourly_vars[1].ValuesAsNumpy.return_value = winds
        block = response.Hourly.return_value
        block.Time.return_value = start
        block.TimeEnd.return_value = start + hours * interval
        block.Interval.return_value = interval
        block.Variables.side_effect = lambda i: hourly_vars[i]
    else:
        response.Hourly.return_value = None
    return response


@pytest.fixture
def testville_store():
    return CityStore([TESTVILLE])


@pytest.fixture
def cities_file(tmp_path):
    def write(payload):
        path = tmp_path / "cities.json"
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return path

    return write
