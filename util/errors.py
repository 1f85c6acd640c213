# util/errors.py
from typing import Literal, Optional
from fastapi import HTTPException, status
from util.enums import BackingStoreFailure, ErrorMessage

StoreOperation = Literal["fetch", "list"]


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


def _error_for(operation: StoreOperation, kind: BackingStoreFailure) -> ErrorMessage:
    if kind == BackingStoreFailure.ACCESS_DENIED:
        return ErrorMessage.ACCESS_DENIED
    if operation == "list":
        return ErrorMessage.LISTING_FAILED
    if kind == BackingStoreFailure.NOT_FOUND:
        return ErrorMessage.OBJECT_NOT_FOUND
    return ErrorMessage.STORE_UNAVAILABLE


class BackingStoreError(AppError):
    """
    Authoritative failure from the object store (fail-hard).
    Never absorbed by the service layer; FastAPI maps it to the response status.
    """

    def __init__(
        self,
        kind: BackingStoreFailure,
        operation: StoreOperation,
        key: Optional[str] = None,
    ) -> None:
        info = _error_for(operation, kind).value
        super().__init__(info.message, info.http_status)
        self.kind = kind
        self.operation = operation
        self.key = key

    def __str__(self) -> str:
        return f"{self.operation} failed ({self.kind.value}) key={self.key}"
