from typing import Optional
from fastapi import APIRouter, Depends

from storeadmin.api.deps import get_session
from storeadmin.core.security import SessionUser
from storeadmin.schemas.users import SessionResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/session", response_model=Optional[SessionResponse])
def current_session(session: Optional[SessionUser] = Depends(get_session)):
    """Signed-in user for the pages' scripts, or null"""
    if session is None:
        return None
    return SessionResponse(**session.model_dump())
