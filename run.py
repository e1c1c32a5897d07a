"""Serve the random weather API, or resolve one result to stdout with --once. Loads .env from project root."""

import argparse
import os
import sys

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))

from randomweather import CityDatasetError, CityStore, ConfigError, Settings, build_resolver, create_app
from randomweather.display import print_display
from randomweather.logger import configure_logging, logger
from randomweather.models import Success


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Random city weather service")
    parser.add_argument("--once", action="store_true", help="resolve one random city, print it and exit")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level, settings.log_file)
        store = CityStore.from_file(settings.cities_path)
    except (ConfigError, CityDatasetError) as e:
        logger.critical("Startup failed: {}", e)
        return 1

    resolver = build_resolver(settings, store)

    if args.once:
        outcome = resolver.resolve()
        if isinstance(outcome, Success):
            print_display(outcome.result)
            return 0
        print(f"❌ No weather after {outcome.attempts} attempts.", file=sys.stderr)
        return 1

    app = create_app(resolver, store)
    logger.info("🌤️  Random Weather Server is running on http://{}:{}", settings.host, settings.port)
    logger.info("📍 API endpoint: http://{}:{}/api/randomWeather", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
