# app/routers/deps.py
"""Shared request dependencies."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

http_bearer = HTTPBearer(auto_error=False)


def get_token(creds: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer)) -> Optional[str]:
    """
    Raw bearer token, or None when the Authorization header is missing or not "Bearer <token>".
    The services decide whether None is acceptable.
    """
    if creds is None:
        return None
    return creds.credentials.strip()
