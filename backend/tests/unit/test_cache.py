"""Unit tests for the in-memory TTL cache."""

from swms.core.cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestTTLCache:

    def test_get_returns_fresh_value(self):
        cache = TTLCache[str](ttl_seconds=60, max_size=10)
        cache.set("grinder", "High")

        assert cache.get("grinder") == "High"
        assert cache.hits == 1

    def test_expired_entry_is_dropped(self):
        clock = FakeClock()
        cache = TTLCache[str](ttl_seconds=60, max_size=10, clock=clock)
        cache.set("grinder", "High")

        clock.now += 61

        assert cache.get("grinder") is None
        assert len(cache) == 0
        assert cache.misses == 1

    def test_least_recently_used_is_evicted(self):
        cache = TTLCache[int](ttl_seconds=60, max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("b") is None
        assert cache.get("a") == 1
        assert cache.get("c") == 3

    def test_clear_resets_counters(self):
        cache = TTLCache[int](ttl_seconds=60, max_size=2)
        cache.set("a", 1)
        cache.get("a")
        cache.clear()

        assert len(cache) == 0
        assert cache.hits == 0
