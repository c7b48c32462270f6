from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storeadmin.api.deps import get_db, require_session
from storeadmin.core.security import SessionUser
from storeadmin.db.models.stores import Status
from storeadmin.db.queries import DataAccessError, create_store, list_active_stores
from storeadmin.schemas.stores import StoreCreate, StoreResponse

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", response_model=List[StoreResponse])
def list_stores(db: Session = Depends(get_db)):
    try:
        return list_active_stores(db)
    except DataAccessError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch stores")


@router.post("", response_model=StoreResponse)
def add_store(
    payload: StoreCreate,
    db: Session = Depends(get_db),
    session: SessionUser = Depends(require_session),
):
    try:
        return create_store(db, status=Status.ACTIVE, **payload.model_dump())
    except DataAccessError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create store")
