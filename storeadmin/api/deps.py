from typing import Generator, Optional
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from storeadmin.core.security import SessionUser, read_session


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_session(request: Request) -> Optional[SessionUser]:
    return read_session(request)


def require_session(
    session: Optional[SessionUser] = Depends(get_session),
) -> SessionUser:
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return session


def require_session_user_id(
    session: SessionUser = Depends(require_session),
) -> str:
    """Session must carry the signed-in user's id, not just an email"""
    if not session.id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return session.id
