# controller/controller_dependencies.py
from fastapi import Request
from fastapi_limiter.depends import RateLimiter
from prometheus_client import CollectorRegistry
from config.settings import settings
from service.file_service import FileService

# Shared instance so tests can override it via app.dependency_overrides.
rate_limiter = RateLimiter(
    times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS
)


def get_file_service(request: Request) -> FileService:
    # Built once in the lifespan; see main.lifespan
    return request.app.state.file_service


def get_metrics_registry(request: Request) -> CollectorRegistry:
    return request.app.state.metrics_registry
