# repository/object_store_repository.py
import logging
from typing import List, Optional
from botocore.exceptions import BotoCoreError, ClientError
from types_aiobotocore_s3.client import S3Client
from core.entities import StoredObject
from util.constants import DEFAULT_CONTENT_TYPE
from util.enums import BackingStoreFailure
from util.errors import BackingStoreError, StoreOperation
from util.timing import timed

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}
_DENIED_CODES = {"403", "AccessDenied", "Forbidden", "AllAccessDisabled"}


def classify_store_error(exc: Exception) -> BackingStoreFailure:
    if isinstance(exc, ClientError):
        code = str(exc.response.get("Error", {}).get("Code", ""))
        if code in _NOT_FOUND_CODES:
            return BackingStoreFailure.NOT_FOUND
        if code in _DENIED_CODES:
            return BackingStoreFailure.ACCESS_DENIED
    return BackingStoreFailure.UNAVAILABLE


class ObjectStoreRepository:
    """
    S3 bucket access for the gateway (fail-hard).

    Every botocore failure is re-raised as BackingStoreError so callers only
    branch on one type; nothing is retried here.
    """

    def __init__(self, client: S3Client, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    @property
    def bucket(self) -> str:
        return self._bucket

    def _fail(
        self, exc: Exception, operation: StoreOperation, key: Optional[str]
    ) -> BackingStoreError:
        kind = classify_store_error(exc)
        logger.error(
            "store.%s.error bucket=%s key=%s kind=%s err=%s",
            operation,
            self._bucket,
            key,
            kind.value,
            type(exc).__name__,
        )
        return BackingStoreError(kind, operation, key)

    async def fetch(self, key: str) -> StoredObject:
        try:
            with timed(logger, "store.fetch", key=key):
                res = await self._client.get_object(Bucket=self._bucket, Key=key)
                async with res["Body"] as stream:
                    body = await stream.read()
        except (ClientError, BotoCoreError) as e:
            raise self._fail(e, "fetch", key) from e
        return StoredObject(
            body=body, content_type=res.get("ContentType") or DEFAULT_CONTENT_TYPE
        )

    async def list(self, prefix: Optional[str] = None) -> List[str]:
        params = {"Bucket": self._bucket}
        if prefix:
            params["Prefix"] = prefix
        keys: List[str] = []
        try:
            with timed(logger, "store.list", prefix=prefix or ""):
                paginator = self._client.get_paginator("list_objects_v2")
                async for page in paginator.paginate(**params):
                    for item in page.get("Contents", []):
                        if "Key" in item:
                            keys.append(item["Key"])
        except (ClientError, BotoCoreError) as e:
            raise self._fail(e, "list", prefix) from e
        logger.info("store.list.ok bucket=%s count=%d", self._bucket, len(keys))
        return keys
