"""Static city dataset, loaded once at startup and sampled per attempt."""

import json
import random
from pathlib import Path

from loguru import logger

from randomweather.models import CityRecord

REQUIRED_FIELDS = ("name", "country", "latitude", "longitude", "population")


class CityDatasetError(RuntimeError):
    """The dataset is missing, unparsable or empty. Fatal at startup."""


class CityStore:
    """Read-only collection of cities with uniform random selection."""

    def __init__(self, cities, *, rng: random.Random | None = None):
        self._cities = tuple(cities)
        if not self._cities:
            raise CityDatasetError("City dataset is empty")
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, path, *, rng: random.Random | None = None) -> "CityStore":
        """
        Load a JSON list of city objects.

        Args:
            path: Path to a JSON file shaped like ``[{"name": ..., "country": ...,
                "latitude": ..., "longitude": ..., "population": ...}, ...]``.
            rng: Optional seeded random source for reproducible draws.

        Raises:
            CityDatasetError: if the file cannot be read or a record is malformed.
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise CityDatasetError(f"Cannot load cities from {path}: {e}") from e
        if not isinstance(raw, list):
            raise CityDatasetError(f"{path} must contain a JSON list of cities")

        store = cls([_parse_record(item, index) for index, item in enumerate(raw)], rng=rng)
        logger.info("Loaded {} cities from {}", len(store), path)
        return store

    def __len__(self) -> int:
        return len(self._cities)

    def random_city(self) -> CityRecord:
        return self._cities[self._rng.randrange(len(self._cities))]


def _parse_record(item, index: int) -> CityRecord:
    if not isinstance(item, dict):
        raise CityDatasetError(f"City #{index} is not an object")
    missing = [field for field in REQUIRED_FIELDS if field not in item]
    if missing:
        raise CityDatasetError(f"City #{index} is missing {', '.join(missing)}")
    try:
        return CityRecord(
            name=str(item["name"]),
            country=str(item["country"]),
            latitude=float(item["latitude"]),
            longitude=float(item["longitude"]),
            population=int(item["population"]),
        )
    except (TypeError, ValueError) as e:
        raise CityDatasetError(f"City #{index} has an invalid value: {e}") from e
