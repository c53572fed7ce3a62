from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from flisol.config import ANONYMOUS_PERMISSIONS, PUBLIC_FILES_PATH
from flisol.core.permissions import AuthorizationProvider, Caller
from flisol.core.security import decode_token
from flisol.db.sa import get_session
from flisol.services.articles import ArticleListHandler
from flisol.services.files import PublicPathResolver


logger = logging.getLogger("flisol.auth.deps")
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_caller(
    token: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Caller:
    if token is None:
        return Caller(permissions=ANONYMOUS_PERMISSIONS)
    try:
        payload = decode_token(token.credentials)
    except JWTError:
        logger.warning(
            "Access token invalid or expired",
            extra={"event": "access_token_invalid_or_expired"},
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    if payload.get("type") != "access":
        logger.warning(
            "Access token with invalid type",
            extra={"event": "access_token_invalid_type"},
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")
    sub = payload.get("sub")
    if not sub:
        logger.warning(
            "Access token missing subject",
            extra={"event": "access_token_missing_sub"},
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject")
    return Caller(
        id=str(sub),
        permissions=frozenset(str(p) for p in payload.get("permissions") or []),
        is_admin=bool(payload.get("admin", False)),
    )


def get_authorization() -> AuthorizationProvider:
    return AuthorizationProvider()


def get_path_resolver() -> PublicPathResolver:
    return PublicPathResolver(PUBLIC_FILES_PATH)


def get_article_list_handler(
    session: AsyncSession = Depends(get_session),
    authorization: AuthorizationProvider = Depends(get_authorization),
    resolver: PublicPathResolver = Depends(get_path_resolver),
) -> ArticleListHandler:
    return ArticleListHandler(authorization, session, resolver)
