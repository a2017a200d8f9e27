import pytest

from gittree import ObjectStore


class CountingStore(ObjectStore):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.puts = []

    def put(self, obj):
        hash_value = super().put(obj)
        self.puts.append(obj)
        return hash_value


@pytest.fixture
def store():
    return CountingStore()
