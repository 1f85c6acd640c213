# model/cache.py
from pydantic import BaseModel


class CacheEnvelope(BaseModel):
    """
    At-rest form of a cached object.
    `body` is base64 so the value stays text-safe; `contentType` rides along so
    hits can be served with the original header.
    """

    body: str
    contentType: str | None = None
