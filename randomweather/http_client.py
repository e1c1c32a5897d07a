"""Outbound HTTP session shared by Nominatim and Open-Meteo clients."""

import openmeteo_requests
import requests
import requests_cache

from randomweather.config import Settings

CACHE_EXPIRY_SECONDS = 3600


def build_session(settings: Settings) -> requests.Session:
    """
    Plain session by default. With ``RANDOMWEATHER_HTTP_CACHE`` set, a 1-hour
    SQLite-backed cache sits in front of both upstreams. No retries here: the
    resolver owns retrying.
    """
    if settings.http_cache:
        session = requests_cache.CachedSession(settings.http_cache, expire_after=CACHE_EXPIRY_SECONDS)
    else:
        session = requests.Session()
    session.headers["User-Agent"] = settings.user_agent
    return session


def build_openmeteo(session: requests.Session) -> openmeteo_requests.Client:
    return openmeteo_requests.Client(session=session)
