from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from jose import jwt


# JWT Settings from env with sane defaults
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-insecure-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(subject: str, permissions: Iterable[str] = (), admin: bool = False,
                        expires_minutes: Optional[int] = None) -> str:
    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "type": "access",
        "permissions": sorted(set(permissions)),
    }
    if admin:
        to_encode["admin"] = True
    expire = _utcnow() + timedelta(minutes=expires_minutes or ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
