"""Random city weather: pick a city, reverse geocode it, fetch its forecast."""

from randomweather.api import create_app
from randomweather.cities import CityDatasetError, CityStore
from randomweather.config import ConfigError, Settings
from randomweather.resolver import Resolver, build_resolver

__all__ = [
    "CityDatasetError",
    "CityStore",
    "ConfigError",
    "Resolver",
    "Settings",
    "build_resolver",
    "create_app",
]
