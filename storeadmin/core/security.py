from typing import Optional

from fastapi import Request
from jose import JWTError, jwt
from pydantic import BaseModel

from storeadmin.core.config import settings

ALGORITHM = "HS256"


class SessionUser(BaseModel):
    """Signed-in user as asserted by the sign-in provider's session token."""
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None


def decode_session_token(token: str) -> Optional[SessionUser]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return SessionUser(
        id=payload.get("sub"),
        email=payload.get("email"),
        name=payload.get("name"),
        image=payload.get("picture"),
    )


def read_session(request: Request) -> Optional[SessionUser]:
    """
    Resolve the session for a request.
    A bearer token in the Authorization header wins over the session cookie.
    """
    token = None
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        token = credentials
    else:
        token = request.cookies.get(settings.SESSION_COOKIE_NAME)

    if not token:
        return None
    return decode_session_token(token)
