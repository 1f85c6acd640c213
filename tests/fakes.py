"""In-memory stand-ins for the Redis and S3 clients used by the repositories."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from botocore.exceptions import ClientError
from redis.exceptions import ConnectionError as RedisConnectionError


class FakeRedis:
    def __init__(self) -> None:
        self.data: Dict[str, bytes] = {}
        self.ttls: Dict[str, Optional[int]] = {}
        self.get_calls = 0
        self.set_calls = 0
        self.fail = False

    async def mget(self, keys: List[str]) -> List[Optional[bytes]]:
        self.get_calls += 1
        if self.fail:
            raise RedisConnectionError("redis down")
        return [self.data.get(k) for k in keys]

    async def set(self, key: str, value: Any, ex: Optional[int] = None) -> bool:
        self.set_calls += 1
        if self.fail:
            raise RedisConnectionError("redis down")
        self.data[key] = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        self.ttls[key] = ex
        return True


class FakeBody:
    def __init__(self, payload: bytes) -> None:
        self._payload = payload

    async def __aenter__(self) -> "FakeBody":
        return self

    async def __aexit__(self, *_exc) -> None:
        return None

    async def read(self) -> bytes:
        return self._payload


class FakePaginator:
    def __init__(self, client: "FakeS3Client") -> None:
        self._client = client

    async def paginate(self, **params) -> AsyncIterator[dict]:
        self._client.list_calls += 1
        self._client.last_list_params = params
        if self._client.fail_with is not None:
            raise self._client.fail_with
        prefix = params.get("Prefix", "")
        keys = [k for k in self._client.objects if k.startswith(prefix)]
        size = self._client.page_size
        for i in range(0, len(keys), size):
            await asyncio.sleep(0)
            yield {"Contents": [{"Key": k, "Size": 0} for k in keys[i : i + size]]}
        if not keys:
            yield {"KeyCount": 0}


class FakeS3Client:
    """Keys keep insertion order so listings mimic a backing store's ordering."""

    def __init__(self) -> None:
        self.objects: Dict[str, Tuple[bytes, Optional[str]]] = {}
        self.get_calls: Dict[str, int] = {}
        self.list_calls = 0
        self.last_list_params: dict = {}
        self.page_size = 1000
        self.fail_with: Optional[Exception] = None

    def put(self, key: str, body: bytes, content_type: Optional[str] = None) -> None:
        self.objects[key] = (body, content_type)

    async def get_object(self, Bucket: str, Key: str) -> dict:
        self.get_calls[Key] = self.get_calls.get(Key, 0) + 1
        # Yield so concurrent requests interleave like real network I/O.
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        if Key not in self.objects:
            raise client_error("NoSuchKey", "GetObject")
        body, content_type = self.objects[Key]
        res: dict = {"Body": FakeBody(body), "ContentLength": len(body)}
        if content_type is not None:
            res["ContentType"] = content_type
        return res

    def get_paginator(self, name: str) -> FakePaginator:
        assert name == "list_objects_v2"
        return FakePaginator(self)


def client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)
