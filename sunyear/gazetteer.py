"""
City gazetteer search.

The `cities` table is filled by an external importer. We read it once into
an immutable in-memory index and answer prefix queries from that.

Why an index object instead of querying per request?
- "name starts with" is case-sensitive here, which SQLite LIKE is not
- reloads build a fresh index and swap it in, so a search never sees a
  half-imported table
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class CityRecord:
    """One gazetteer entry. Coordinates are missing for low-confidence rows."""
    id: int
    name: str
    country: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    population: int = 0
    region: Optional[str] = None

    @classmethod
    def from_model(cls, city: models.City) -> "CityRecord":
        return cls(
            id=city.id,
            name=city.name,
            country=city.country,
            latitude=city.latitude,
            longitude=city.longitude,
            population=city.population or 0,
            region=city.region,
        )


class GazetteerIndex:
    """
    Read-only prefix index over city names.

    Records are held sorted by (name, id) so a prefix maps to one
    contiguous slice found with bisect.
    """

    def __init__(self, records: Iterable[CityRecord] = (), preferred_country: str = "FI"):
        self.preferred_country = preferred_country
        self._records = tuple(sorted(records, key=lambda r: (r.name, r.id)))
        self._names = [r.name for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def search(self, prefix: Optional[str], limit: int = DEFAULT_LIMIT) -> List[CityRecord]:
        """
        Cities whose name starts with `prefix`.

        Preferred-country matches first, then by name, then by id.
        Queries shorter than two characters return nothing.
        """
        if not prefix or len(prefix) < MIN_QUERY_LENGTH or limit <= 0:
            return []

        matches = []
        i = bisect_left(self._names, prefix)
        while i < len(self._names) and self._names[i].startswith(prefix):
            matches.append(self._records[i])
            i += 1

        matches.sort(key=lambda r: (r.country != self.preferred_country, r.name, r.id))
        return matches[:limit]


def load_index(db: Session, preferred_country: str = "FI") -> GazetteerIndex:
    """
    Build an index from every row of the cities table.

    An unreachable store or missing table yields an empty index: to a
    caller that looks the same as "no matches".
    """
    try:
        rows = db.execute(select(models.City).order_by(models.City.id)).scalars().all()
    except SQLAlchemyError:
        logger.warning("Gazetteer store unavailable; serving an empty index", exc_info=True)
        return GazetteerIndex((), preferred_country)

    index = GazetteerIndex((CityRecord.from_model(c) for c in rows), preferred_country)
    logger.info("Loaded %d cities into gazetteer index", len(index))
    return index


class GazetteerStore:
    """
    Holds the currently published index.

    Publishing is a single reference assignment; searches that already
    grabbed `current` finish against the index they started with.
    """

    def __init__(self, preferred_country: str = "FI"):
        self.preferred_country = preferred_country
        self._index = GazetteerIndex((), preferred_country)

    @property
    def current(self) -> GazetteerIndex:
        return self._index

    def publish(self, index: GazetteerIndex) -> None:
        self._index = index
        logger.info("Published gazetteer index with %d cities", len(index))

    def reload(self, session_factory: Callable[[], Session]) -> GazetteerIndex:
        """Build a fresh index from the store, then swap it in."""
        db = session_factory()
        try:
            index = load_index(db, self.preferred_country)
        finally:
            db.close()
        self.publish(index)
        return index
