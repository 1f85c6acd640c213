import os

# Settings() is built at import time; seed required env before any project import.
os.environ.setdefault("APP_ENV", "prod")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")
os.environ.setdefault("S3_BUCKET_NAME", "test-bucket")
os.environ.setdefault("AWS_REGION", "eu-west-1")

import pytest
from prometheus_client import CollectorRegistry

from core.metrics import MetricsRecorder
from repository.cache_repository import CacheRepository
from repository.object_store_repository import ObjectStoreRepository
from service.file_service import FileService
from tests.fakes import FakeRedis, FakeS3Client

REGION = "eu-west-1"
BUCKET = "test-bucket"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def redis_client() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def s3_client() -> FakeS3Client:
    return FakeS3Client()


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def metrics(registry) -> MetricsRecorder:
    return MetricsRecorder(registry, REGION)


@pytest.fixture
def cache(redis_client) -> CacheRepository:
    return CacheRepository(redis_client)


@pytest.fixture
def store(s3_client) -> ObjectStoreRepository:
    return ObjectStoreRepository(s3_client, BUCKET)


@pytest.fixture
def file_service(cache, store, metrics) -> FileService:
    return FileService(cache=cache, store=store, metrics=metrics)
