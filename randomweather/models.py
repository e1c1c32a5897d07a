"""Value types passed between the city store, the upstream clients and the HTTP layer."""

from dataclasses import dataclass

HOURLY_LIMIT = 24
TEMPERATURE_UNIT = "°C"
WIND_SPEED_UNIT = "km/h"
DATA_SOURCES = {
    "geocoding": "OpenStreetMap Nominatim (https://nominatim.openstreetmap.org)",
    "weather": "Open-Meteo (https://open-meteo.com)",
}


@dataclass(frozen=True)
class CityRecord:
    name: str
    country: str
    latitude: float
    longitude: float
    population: int


@dataclass(frozen=True)
class ResolvedLocation:
    """Human-readable place returned by reverse geocoding."""

    display_name: str
    country: str


@dataclass(frozen=True)
class HourlyReading:
    time: str
    temperature: float | None
    wind_speed: float | None


@dataclass(frozen=True)
class ForecastData:
    """
    Current conditions plus the hourly series, in upstream order.

    ``hourly`` may hold more or fewer than 24 readings; trimming happens when
    the result is assembled.
    """

    timezone: str
    temperature: float | None
    wind_speed: float | None
    hourly: tuple[HourlyReading, ...]


@dataclass(frozen=True)
class WeatherResult:
    city: CityRecord
    location: ResolvedLocation
    forecast: ForecastData

    @classmethod
    def assemble(cls, city: CityRecord, location: ResolvedLocation, forecast: ForecastData) -> "WeatherResult":
        """Combine one successful attempt, keeping at most 24 hourly readings."""
        trimmed = ForecastData(
            timezone=forecast.timezone,
            temperature=forecast.temperature,
            wind_speed=forecast.wind_speed,
            hourly=tuple(forecast.hourly[:HOURLY_LIMIT]),
        )
        return cls(city=city, location=location, forecast=trimmed)

    def to_dict(self) -> dict:
        """JSON body served by ``GET /api/randomWeather``."""
        return {
            # Coordinates come from the dataset record, never from the geocoder.
            "chosenPlace": {
                "displayName": self.location.display_name,
                "country": self.location.country,
                "latitude": self.city.latitude,
                "longitude": self.city.longitude,
                "timezone": self.forecast.timezone,
            },
            "forecast": {
                "current": {
                    "temperature": self.forecast.temperature,
                    "temperatureUnit": TEMPERATURE_UNIT,
                    "windSpeed": self.forecast.wind_speed,
                    "windSpeedUnit": WIND_SPEED_UNIT,
                },
                "hourly": [
                    {"time": h.time, "temperature": h.temperature, "windSpeed": h.wind_speed}
                    for h in self.forecast.hourly
                ],
            },
            "dataSources": dict(DATA_SOURCES),
        }


@dataclass(frozen=True)
class Success:
    result: WeatherResult
    attempts: int


@dataclass(frozen=True)
class Exhausted:
    """Every attempt failed; nothing about the individual failures is kept."""

    attempts: int
