from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import JWTError, jwt

from flisol.core import deps as core_deps
from flisol.core import security
from flisol.core.permissions import ACCESS_CONTENT, AuthorizationProvider, Caller


def _creds(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_access_token_roundtrip_claims():
    token = security.create_access_token("5", permissions=[ACCESS_CONTENT, ACCESS_CONTENT])
    claims = security.decode_token(token)
    assert claims["sub"] == "5"
    assert claims["type"] == "access"
    assert claims["permissions"] == [ACCESS_CONTENT]
    assert "admin" not in claims


@pytest.mark.anyio
async def test_caller_from_token():
    token = security.create_access_token("5", permissions=[ACCESS_CONTENT], admin=True)
    caller = await core_deps.get_current_caller(_creds(token))
    assert caller == Caller(id="5", permissions=frozenset({ACCESS_CONTENT}), is_admin=True)


@pytest.mark.anyio
async def test_anonymous_caller_without_token(monkeypatch):
    monkeypatch.setattr(core_deps, "ANONYMOUS_PERMISSIONS", frozenset({ACCESS_CONTENT}))
    caller = await core_deps.get_current_caller(None)
    assert caller.is_anonymous
    assert caller.permissions == frozenset({ACCESS_CONTENT})


@pytest.mark.anyio
async def test_expired_token_rejected():
    token = security.create_access_token("5", expires_minutes=-1)
    with pytest.raises(HTTPException) as info:
        await core_deps.get_current_caller(_creds(token))
    assert info.value.status_code == 401


@pytest.mark.anyio
async def test_wrong_token_type_rejected():
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"sub": "5", "type": "refresh", "exp": exp},
                       security.JWT_SECRET_KEY, algorithm=security.JWT_ALGORITHM)
    with pytest.raises(HTTPException) as info:
        await core_deps.get_current_caller(_creds(token))
    assert info.value.detail == "Invalid token type"


@pytest.mark.anyio
async def test_missing_subject_rejected():
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"type": "access", "exp": exp},
                       security.JWT_SECRET_KEY, algorithm=security.JWT_ALGORITHM)
    with pytest.raises(HTTPException) as info:
        await core_deps.get_current_caller(_creds(token))
    assert info.value.detail == "Invalid token subject"


def test_foreign_signature_rejected():
    token = jwt.encode({"sub": "5", "type": "access"}, "some-other-secret", algorithm="HS256")
    with pytest.raises(JWTError):
        security.decode_token(token)


def test_authorization_provider():
    authz = AuthorizationProvider()
    assert authz.has_permission(Caller(permissions=frozenset({ACCESS_CONTENT})), ACCESS_CONTENT)
    assert not authz.has_permission(Caller(id="3", permissions=frozenset({"edit own content"})), ACCESS_CONTENT)
    assert authz.has_permission(Caller(id="1", is_admin=True), "anything at all")
