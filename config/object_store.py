# config/object_store.py
from contextlib import AsyncExitStack
from typing import Optional
from aiobotocore.config import AioConfig
from aiobotocore.session import get_session
from types_aiobotocore_s3.client import S3Client
from config.settings import settings

_stack: Optional[AsyncExitStack] = None
_client: Optional[S3Client] = None


async def get_s3() -> S3Client:
    global _stack, _client
    if _client is None:
        client_args = {
            "region_name": settings.AWS_REGION,
            "endpoint_url": settings.S3_ENDPOINT_URL,
            "aws_access_key_id": settings.AWS_ACCESS_KEY_ID,
            "aws_secret_access_key": settings.AWS_SECRET_ACCESS_KEY,
        }
        session = get_session()
        # Unset credentials fall through to the botocore provider chain.
        creator = session.create_client(
            "s3",
            config=AioConfig(signature_version="s3v4"),
            **{k: v for k, v in client_args.items() if v},
        )
        # The client is an async context manager; keep it open for the process lifetime.
        _stack = AsyncExitStack()
        _client = await _stack.enter_async_context(creator)
    return _client


async def close_s3() -> None:
    global _stack, _client
    if _stack is not None:
        await _stack.aclose()
    _stack = None
    _client = None
