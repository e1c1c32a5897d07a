"""Console rendering of a weather result for ``run.py --once``."""

from datetime import datetime

from randomweather.models import TEMPERATURE_UNIT, WIND_SPEED_UNIT, WeatherResult


def print_display(result: WeatherResult) -> None:
    """Print place, current conditions and the hourly table."""
    place = result.location
    forecast = result.forecast
    print("\n" + "=" * 45)
    print(f"🌤️  RANDOM WEATHER: {place.display_name.upper()}")
    print(f"Country: {place.country}")
    print(f"Coordinates: {result.city.latitude:.4f}, {result.city.longitude:.4f} ({forecast.timezone})")
    print(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print("-" * 45)
    print(
        f"Now: {_fmt(forecast.temperature)} {TEMPERATURE_UNIT}, "
        f"wind {_fmt(forecast.wind_speed)} {WIND_SPEED_UNIT}"
    )
    print("-" * 45)
    for h in forecast.hourly:
        print(f"• {h.time}  {_fmt(h.temperature):>6} {TEMPERATURE_UNIT}  {_fmt(h.wind_speed):>6} {WIND_SPEED_UNIT}")
    print("=" * 45 + "\n")


def _fmt(value) -> str:
    return "n/a" if value is None else f"{value:.1f}"
