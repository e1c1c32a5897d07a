"""Resolve latitude/longitude to a display name and country via OpenStreetMap Nominatim."""

from loguru import logger

from randomweather.models import ResolvedLocation

NOMINATIM_URL = "https://nominatim.openstreetmap.org/reverse"


class ReverseGeocoder:
    """One Nominatim ``/reverse`` call per invocation, no internal retries."""

    def __init__(self, session, *, timeout: float = 10.0, url: str = NOMINATIM_URL):
        self.session = session
        self.timeout = timeout
        self.url = url

    def reverse_geocode(self, lat: float, lon: float) -> ResolvedLocation | None:
        """
        Look up the place at (lat, lon). Returns None on timeout, transport error,
        non-2xx status, or a body without both a display name and a country.
        """
        params = {"lat": lat, "lon": lon, "format": "json", "accept-language": "en"}
        try:
            res = self.session.get(self.url, params=params, timeout=self.timeout)
            if not res.ok:
                logger.warning("Nominatim returned status {}", res.status_code)
                return None
            data = res.json()
        except Exception as e:
            logger.warning("Reverse geocode error: {}", e)
            return None

        return _parse_location(data)


def _parse_location(data) -> ResolvedLocation | None:
    if not isinstance(data, dict):
        return None
    if data.get("error"):
        logger.warning("Nominatim: {}", data["error"])
        return None
    display_name = data.get("display_name")
    address = data.get("address")
    country = address.get("country") if isinstance(address, dict) else None
    if not display_name or not country:
        return None
    return ResolvedLocation(display_name=display_name, country=country)
