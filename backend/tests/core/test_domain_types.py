"""Domain Types: verifies rich type definitions and enum values."""

from uuid import uuid4

from weather_api.core.domain_types import RepositoryBackend, WeatherId


def test_weather_id_wraps_uuid():
    uid = uuid4()
    assert WeatherId(uid) == uid


def test_repository_backend_values():
    assert set(RepositoryBackend) == {RepositoryBackend.SQL, RepositoryBackend.MEMORY}
    assert RepositoryBackend("memory") is RepositoryBackend.MEMORY
