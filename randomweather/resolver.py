"""Bounded retry loop: random city -> reverse geocode -> forecast, until one attempt succeeds."""

import time

from loguru import logger

from randomweather.cities import CityStore
from randomweather.config import Settings
from randomweather.geocode import ReverseGeocoder
from randomweather.http_client import build_openmeteo, build_session
from randomweather.models import Exhausted, Success, WeatherResult
from randomweather.weather import WeatherClient

MAX_ATTEMPTS = 10
# Slightly over one second to stay inside Nominatim's 1 request/second policy.
RETRY_DELAY_SECONDS = 1.1


class Resolver:
    """
    Coordinates the city store and both upstream clients for one request.

    Each attempt draws a fresh city (repeats allowed), reverse geocodes it and,
    only if that worked, fetches its forecast. A failed attempt is followed by
    a fixed ``retry_delay`` pause unless it was the last one.
    """

    def __init__(
        self,
        store: CityStore,
        geocoder,
        weather,
        *,
        max_attempts: int = MAX_ATTEMPTS,
        retry_delay: float = RETRY_DELAY_SECONDS,
        sleep=time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.geocoder = geocoder
        self.weather = weather
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._sleep = sleep

    def resolve(self) -> Success | Exhausted:
        for attempt in range(1, self.max_attempts + 1):
            logger.info("Attempt {}/{}: selecting random city...", attempt, self.max_attempts)
            city = self.store.random_city()
            logger.info("Selected city: {}, {} ({}, {})", city.name, city.country, city.latitude, city.longitude)

            location = self.geocoder.reverse_geocode(city.latitude, city.longitude)
            if location is None:
                logger.info("Reverse geocoding failed for {}, retrying...", city.name)
                self._pause(attempt)
                continue
            logger.info("📍 Geocoding successful: {}", location.display_name)

            forecast = self.weather.fetch_forecast(city.latitude, city.longitude)
            if forecast is None:
                logger.info("Weather fetch failed for {}, retrying...", city.name)
                self._pause(attempt)
                continue

            logger.info("Successfully fetched weather for {}", location.display_name)
            return Success(result=WeatherResult.assemble(city, location, forecast), attempts=attempt)

        logger.error("All {} attempts to get weather data failed", self.max_attempts)
        return Exhausted(attempts=self.max_attempts)

    def _pause(self, attempt: int) -> None:
        if attempt < self.max_attempts:
            self._sleep(self.retry_delay)


def build_resolver(settings: Settings, store: CityStore) -> Resolver:
    """Wire the production Nominatim and Open-Meteo clients around ``store``."""
    session = build_session(settings)
    return Resolver(
        store,
        ReverseGeocoder(session, timeout=settings.http_timeout),
        WeatherClient(build_openmeteo(session), timeout=settings.http_timeout),
        max_attempts=settings.max_attempts,
        retry_delay=settings.retry_delay,
    )
