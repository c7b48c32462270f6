from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storeadmin.api.deps import get_db, require_session_user_id
from storeadmin.db.queries import update_user_store
from storeadmin.schemas.users import SuccessResponse, UserStoreUpdate

router = APIRouter(prefix="/user", tags=["users"])


@router.put("/store", response_model=SuccessResponse)
def assign_store(
    payload: UserStoreUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(require_session_user_id),
):
    """Assign the signed-in user to a store"""
    if not update_user_store(db, user_id, payload.store_id):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update store")
    return SuccessResponse(success=True)
