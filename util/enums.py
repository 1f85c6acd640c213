# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class CacheStatus(str, Enum):
    HIT = "hit"
    MISS = "miss"

    @property
    def header(self) -> str:
        return self.value.upper()


class CacheLookupStatus(str, Enum):
    HIT = "hit"
    MISS = "miss"
    UNAVAILABLE = "unavailable"


class BackingStoreFailure(str, Enum):
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    UNAVAILABLE = "unavailable"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    OBJECT_NOT_FOUND = ErrorInfo("File not found", status.HTTP_404_NOT_FOUND)
    ACCESS_DENIED = ErrorInfo("Access to file denied", status.HTTP_403_FORBIDDEN)
    STORE_UNAVAILABLE = ErrorInfo(
        "Error downloading file", status.HTTP_502_BAD_GATEWAY
    )
    LISTING_FAILED = ErrorInfo("Error listing files", status.HTTP_502_BAD_GATEWAY)
    INTERNAL_ERROR = ErrorInfo("Internal Error", status.HTTP_502_BAD_GATEWAY)
