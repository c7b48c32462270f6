from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from storeadmin.api.deps import get_db, require_session
from storeadmin.core.security import SessionUser
from storeadmin.db.queries import DataAccessError, delete_product_by_id, get_products
from storeadmin.schemas.products import ProductPageResponse
from storeadmin.schemas.users import SuccessResponse

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductPageResponse)
def search_products(
    search: str = "",
    offset: int = Query(0, ge=0),
    store_id: Optional[int] = Query(None, alias="storeId"),
    db: Session = Depends(get_db),
    session: SessionUser = Depends(require_session),
):
    try:
        page = get_products(db, search, offset, store_id)
    except DataAccessError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch products")

    return ProductPageResponse.model_validate(page)


@router.delete("/{product_id}", response_model=SuccessResponse)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    session: SessionUser = Depends(require_session),
):
    try:
        delete_product_by_id(db, product_id)
    except DataAccessError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete product")
    return SuccessResponse(success=True)
