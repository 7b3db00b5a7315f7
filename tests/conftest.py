import os
import tempfile

# Keep the app's SQLite file out of the working tree; must be set before
# sunyear.settings is imported.
os.environ.setdefault("SQLITE_PATH", os.path.join(tempfile.mkdtemp(), "test_gazetteer.sqlite3"))

import pytest

from sunyear.gazetteer import CityRecord, GazetteerIndex
from sunyear.schemas import GeoPoint


@pytest.fixture
def helsinki():
    return GeoPoint(latitude=60.1699, longitude=24.9384)


@pytest.fixture
def city_records():
    return [
        CityRecord(id=1, name="Helsinki", country="FI", latitude=60.1695200, longitude=24.9354500,
                   population=558457, region="Uusimaa"),
        CityRecord(id=2, name="Helsingborg", country="SE", latitude=56.0464900, longitude=12.6945100,
                   population=97122, region="Skåne"),
        CityRecord(id=3, name="Hel", country="FI", population=0),
        CityRecord(id=4, name="Espoo", country="FI", latitude=60.2052000, longitude=24.6522000,
                   population=256760, region="Uusimaa"),
        CityRecord(id=5, name="helsinge", country="DK", population=0),
    ]


@pytest.fixture
def index(city_records):
    return GazetteerIndex(city_records, preferred_country="FI")
