"""
Authorization header helpers.
"""
from typing import Dict, Optional

AUTHORIZATION = "Authorization"

# Header names whose values are masked when logged
SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "x-api-key", "cookie"})


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


def mask_header(name: str, value: str) -> str:
    if name.lower() in SENSITIVE_HEADERS:
        return _mask_value(value)
    return value


def bearer_header(token: str) -> Dict[str, str]:
    """``{"Authorization": "Bearer <token>"}``."""
    return {AUTHORIZATION: f"Bearer {token}"}
