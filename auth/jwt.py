"""
JWT creation and verification (compact JWS, HS256 only).

Tokens are ``header.payload.signature`` with each segment base64url-encoded
without padding, signed with HMAC-SHA256. Secret key is loaded from
``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict, Optional

from config.settings import config

_ALGORITHM = "HS256"
_HEADER = {"alg": _ALGORITHM, "typ": "JWT"}


class TokenError(ValueError):
    """Raised when a token cannot be decoded or fails verification."""


def _b64url_encode(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return urlsafe_b64decode(segment + padding)


def _sign(signing_input: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode(), signing_input, hashlib.sha256).digest()
    return _b64url_encode(digest)


def _json_segment(data: Dict[str, Any]) -> str:
    return _b64url_encode(json.dumps(data, separators=(",", ":")).encode())


def create_token(
    user_id: int,
    email: str,
    name: str,
    expires_in: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    """Create a signed token carrying the user's id, email and name."""
    now = int(time.time())
    if expires_in is None:
        expires_in = config.jwt_expiry_seconds
    payload = {
        "user_id": user_id,
        "email": email,
        "name": name,
        "iat": now,
        "exp": now + expires_in,
    }
    signing_input = f"{_json_segment(_HEADER)}.{_json_segment(payload)}"
    signature = _sign(signing_input.encode("ascii"), secret or config.jwt_secret)
    return f"{signing_input}.{signature}"


def decode_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    """
    Verify a token and return its claims.

    Raises ``TokenError`` on malformed, tampered, wrongly-signed or
    expired tokens.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise TokenError("bad format")
    header_b64, payload_b64, signature = parts

    try:
        header = json.loads(_b64url_decode(header_b64))
        payload = json.loads(_b64url_decode(payload_b64))
    except (ValueError, RecursionError) as exc:
        raise TokenError("undecodable segment") from exc
    if not isinstance(header, dict) or not isinstance(payload, dict):
        raise TokenError("bad format")

    if header.get("alg") != _ALGORITHM:
        raise TokenError("unexpected signing method")

    expected = _sign(f"{header_b64}.{payload_b64}".encode("ascii"), secret or config.jwt_secret)
    if not hmac.compare_digest(signature.encode(), expected.encode()):
        raise TokenError("bad signature")

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or isinstance(exp, bool):
        raise TokenError("missing expiry")
    if exp < time.time():
        raise TokenError("token expired")

    return payload
