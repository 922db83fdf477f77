import json

import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "backups"


@pytest.fixture
def write_location_file(tmp_path):
    """Write a provinces payload to a JSON file and return its path."""

    def _write(provinces, name="locations.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"provinces": provinces}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def punjab_payload():
    return [
        {
            "name": "punjab",
            "districts": [{"name": "lahore", "tehsils": ["Model Town", "Raiwind"]}],
        }
    ]
