# main.py
from fastapi_limiter import FastAPILimiter
import routes
from contextlib import asynccontextmanager
from prometheus_client import REGISTRY
from util.enums import Environment, Color
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.cache import close_redis, get_redis
from config.object_store import close_s3, get_s3
from core.metrics import MetricsRecorder
from fastapi.responses import JSONResponse
from repository.cache_repository import CacheRepository
from repository.object_store_repository import ObjectStoreRepository
from service.file_service import FileService
from util.constants import Headers
from util.logger import init_logger


async def _real_ip(request: Request) -> str:
    if settings.TRUST_PROXY:
        fwd = request.headers.get("x-forwarded-for")
        if fwd:
            return fwd.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    logger = init_logger()
    try:
        print(f"{Color.GREEN}Initializing...{Color.RESET}")
        redis = await get_redis()
        s3 = await get_s3()
        await FastAPILimiter.init(redis, identifier=_real_ip)
        # The default registry already carries process/platform/gc collectors.
        fastApi.state.metrics_registry = REGISTRY
        fastApi.state.file_service = FileService(
            cache=CacheRepository(redis),
            store=ObjectStoreRepository(s3, settings.S3_BUCKET_NAME),
            metrics=MetricsRecorder(REGISTRY, settings.AWS_REGION),
        )
        logger.info(
            "bootstrap.ok bucket=%s region=%s",
            settings.S3_BUCKET_NAME,
            settings.AWS_REGION,
        )
        print(f"{Color.BLUE}Server Started{Color.RESET}")
    except Exception:
        logger.exception("bootstrap.error")
        raise

    try:
        yield
    finally:
        try:
            await close_s3()
        except Exception as e:
            logger.error("shutdown.s3.error err=%s", e)
        try:
            await close_redis()
        except Exception as e:
            logger.error("shutdown.redis.error err=%s", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=False,
    allow_methods=["GET"],  # Read-only gateway
    allow_headers=["Accept"],
    expose_headers=[Headers.CACHE_STATUS],
)


@app.exception_handler(429)
async def ratelimit_handler(request: Request, exc):
    return JSONResponse(
        status_code=429,
        content={
            "ok": False,
            "error": "rate_limited",
            "message": "Too many requests. Try again later.",
        },
        headers={"Retry-After": str(settings.RATE_LIMIT_SECONDS)},
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=reload)
