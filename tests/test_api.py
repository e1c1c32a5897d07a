import pytest

from conftest import FakeGeocoder, FakeWeather, make_forecast, openmeteo_response
from randomweather.api import EXHAUSTED_BODY, create_app
from randomweather.models import DATA_SOURCES, ResolvedLocation
from randomweather.resolver import Resolver
from randomweather.weather import WeatherClient

LOCATION = ResolvedLocation("Testville, Test Country", "Test Country")


class OpenMeteoStub:
    def __init__(self, response):
        self.response = response

    def weather_api(self, url, params, **kwargs):
        return [self.response]


def _client(store, geocoder, weather, sleep=lambda seconds: None):
    app = create_app(Resolver(store, geocoder, weather, sleep=sleep), store)
    app.testing = True
    return app.test_client()


def test_testville_scenario(testville_store):
    weather = WeatherClient(OpenMeteoStub(openmeteo_response(temperature=15, wind_speed=5, hours=24)))
    client = _client(testville_store, FakeGeocoder(LOCATION), weather)

    res = client.get("/api/randomWeather")
    assert res.status_code == 200
    body = res.get_json()

    assert body["chosenPlace"] == {
        "displayName": "Testville, Test Country",
        "country": "Test Country",
        "latitude": 10.0,
        "longitude": 20.0,
        "timezone": "GMT",
    }
    assert body["forecast"]["current"] == {
        "temperature": 15,
        "temperatureUnit": "°C",
        "windSpeed": 5,
        "windSpeedUnit": "km/h",
    }
    assert len(body["forecast"]["hourly"]) == 24
    assert body["forecast"]["hourly"][1] == {"time": "2024-01-01T01:00", "temperature": 1.0, "windSpeed": 0.5}
    assert body["dataSources"] == DATA_SOURCES


@pytest.mark.parametrize("hours, expected", [(3, 3), (24, 24), (30, 24)])
def test_hourly_length_is_capped(testville_store, hours, expected):
    client = _client(testville_store, FakeGeocoder(LOCATION), FakeWeather(make_forecast(hours=hours)))
    assert len(client.get("/api/randomWeather").get_json()["forecast"]["hourly"]) == expected


def test_geocoding_always_failing_returns_503(testville_store):
    delays = []
    geocoder = FakeGeocoder(None)
    client = _client(testville_store, geocoder, FakeWeather(), sleep=delays.append)

    res = client.get("/api/randomWeather")
    assert res.status_code == 503
    assert res.get_json() == EXHAUSTED_BODY
    assert res.get_json()["error"] == "Service Unavailable"
    assert len(geocoder.calls) == 10
    assert delays == [1.1] * 9


def test_health_reports_dataset_size(testville_store):
    client = _client(testville_store, FakeGeocoder(), FakeWeather())
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok", "cities": 1}


def test_unknown_route_is_json_404(testville_store):
    client = _client(testville_store, FakeGeocoder(), FakeWeather())
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.get_json()["error"] == "Not Found"


def test_wrong_method_is_json_405(testville_store):
    client = _client(testville_store, FakeGeocoder(), FakeWeather())
    res = client.post("/api/randomWeather")
    assert res.status_code == 405
