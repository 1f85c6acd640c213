# util/functions.py
import base64
import binascii


def encode_body(data: bytes) -> str:
    """Text-safe form of a payload for the cache (base64, ASCII)."""
    return base64.b64encode(data).decode("ascii")


def decode_body(text: str | bytes) -> bytes:
    """
    - Inverse of encode_body.
    - Raises ValueError on anything that is not strict base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64 payload: {e}") from e
