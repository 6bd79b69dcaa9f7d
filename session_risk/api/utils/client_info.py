"""
Client metadata extraction for session registration.
"""

import hashlib
import uuid
from typing import Optional

from fastapi import Request

_FORWARDED_HEADERS = ("X-Forwarded-For", "Proxy-Client-IP", "WL-Proxy-Client-IP")


def device_id_from_request(request: Request) -> str:
    """Stable device identifier derived from the User-Agent"""
    user_agent = request.headers.get("User-Agent")
    if user_agent:
        return hashlib.sha256(user_agent.encode()).hexdigest()[:20]
    return "UNKNOWN_DEVICE_" + uuid.uuid4().hex[:8]


def client_ip_from_request(request: Request) -> Optional[str]:
    """Client address, honoring proxy headers"""
    for header in _FORWARDED_HEADERS:
        value = request.headers.get(header)
        if value and value.lower() != "unknown":
            # X-Forwarded-For may hold a chain, the first hop is the client
            return value.split(",")[0].strip()
    return request.client.host if request.client else None
