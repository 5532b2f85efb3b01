"""
Shared fixtures for certificate cache tests.
"""

import pytest

from certcache.exceptions import BackendError, CacheMiss
from certcache.interfaces.cache import ICache


class RecordingCache(ICache):
    """In-memory test double that records every call in a shared log"""

    def __init__(self, name, calls, data=None, fail_on=()):
        self.name = name
        self.calls = calls
        self.data = dict(data or {})
        self.fail_on = set(fail_on)
        self.errors = {}

    def _record(self, operation, key):
        self.calls.append((self.name, operation, key))
        if operation in self.fail_on:
            error = BackendError(operation, key, self.name)
            self.errors[operation] = error
            raise error

    async def get(self, key):
        self._record("get", key)
        if key not in self.data:
            raise CacheMiss(key)
        return self.data[key]

    async def put(self, key, data):
        self._record("put", key)
        self.data[key] = data

    async def delete(self, key):
        self._record("delete", key)
        self.data.pop(key, None)


@pytest.fixture
def calls():
    """Shared call log, in the order layers were invoked"""
    return []


@pytest.fixture
def make_layer(calls):
    """Factory for recording layers sharing one call log"""
    def _make(name, data=None, fail_on=()):
        return RecordingCache(name, calls, data=data, fail_on=fail_on)
    return _make


@pytest.fixture
def sqlite_url(tmp_path):
    """URL of a throwaway SQLite database file"""
    return f"sqlite:///{tmp_path / 'certcache.db'}"
