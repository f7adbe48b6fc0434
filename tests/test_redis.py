import pytest
from redis.exceptions import RedisError

from dsa_companion.data.repositories.redis import RedisClient


class FakeRedis:
    """In-memory counters and TTLs; pipelines apply all commands or none."""

    def __init__(self, failing_executes=0):
        self.values = {}
        self.ttls = {}
        self.failing_executes = failing_executes

    def pipeline(self, transaction=True):
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, redis):
        self.redis = redis
        self.commands = []

    def incr(self, key):
        self.commands.append(("incr", key, None, False))
        return self

    def expire(self, key, seconds, nx=False):
        self.commands.append(("expire", key, seconds, nx))
        return self

    async def execute(self):
        if self.redis.failing_executes:
            self.redis.failing_executes -= 1
            raise RedisError("Connection reset by peer")

        results = []
        for name, key, seconds, nx in self.commands:
            if name == "incr":
                self.redis.values[key] = self.redis.values.get(key, 0) + 1
                results.append(self.redis.values[key])
            elif nx and key in self.redis.ttls:
                results.append(False)
            else:
                self.redis.ttls[key] = seconds
                results.append(True)
        return results


@pytest.mark.asyncio
async def test_hit_counts_and_sets_window():
    redis = FakeRedis()
    client = RedisClient(redis)

    counts = [await client.hit("rate_limit:1.2.3.4", 900) for _ in range(3)]

    assert counts == [1, 2, 3]
    assert redis.ttls == {"rate_limit:1.2.3.4": 900}


@pytest.mark.asyncio
async def test_hit_keeps_existing_expiry():
    redis = FakeRedis()
    client = RedisClient(redis)

    await client.hit("rate_limit:1.2.3.4", 900)
    redis.ttls["rate_limit:1.2.3.4"] = 120  # part of the window has elapsed
    await client.hit("rate_limit:1.2.3.4", 900)

    assert redis.ttls["rate_limit:1.2.3.4"] == 120


@pytest.mark.asyncio
async def test_failed_hit_does_not_leave_counter_without_expiry():
    redis = FakeRedis(failing_executes=1)
    client = RedisClient(redis)

    counts = [await client.hit("rate_limit:1.2.3.4", 900) for _ in range(3)]

    assert counts == [None, 1, 2]
    assert redis.ttls == {"rate_limit:1.2.3.4": 900}


@pytest.mark.asyncio
async def test_hit_repairs_counter_without_expiry():
    redis = FakeRedis()
    redis.values["rate_limit:1.2.3.4"] = 250
    client = RedisClient(redis)

    count = await client.hit("rate_limit:1.2.3.4", 900)

    assert count == 251
    assert redis.ttls == {"rate_limit:1.2.3.4": 900}
