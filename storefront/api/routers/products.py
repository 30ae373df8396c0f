# storefront/api/routers/products.py
from decimal import Decimal
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api import unwrap
from storefront.data.backend import get_backend
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import ProductFilters, ReviewIn
from storefront.services.backend_client import NO_ROWS, BackendClient
from storefront.services.product_service import ProductsAPI
from storefront.services.review_service import ReviewsAPI

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/")
def list_products(
    category: str | None = Query(None),
    min_price: Decimal | None = Query(None, ge=0),
    max_price: Decimal | None = Query(None, ge=0),
    search: str | None = Query(None),
    sort_by: str | None = Query(None),
    sort_order: Literal["asc", "desc"] | None = Query(None),
    page: int | None = Query(None, gt=0),
    limit: int | None = Query(None, gt=0),
    backend: BackendClient = Depends(get_backend),
):
    filters = ProductFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return unwrap(ProductsAPI(backend).get_products(filters))


@router.get("/category/{category}")
def list_by_category(
    category: str,
    limit: int = Query(10, gt=0),
    backend: BackendClient = Depends(get_backend),
):
    return unwrap(ProductsAPI(backend).get_products_by_category(category, limit))


@router.get("/{product_id}")
def get_product(product_id: str, backend: BackendClient = Depends(get_backend)):
    result = ProductsAPI(backend).get_product(product_id)
    if result.error and result.error.code == NO_ROWS:
        raise HTTPException(status_code=404, detail="Produto não encontrado")
    return unwrap(result)


@router.get("/{product_id}/reviews")
def list_reviews(product_id: str, backend: BackendClient = Depends(get_backend)):
    return unwrap(ReviewsAPI(backend).get_product_reviews(product_id))


@router.post("/{product_id}/reviews", status_code=201)
def create_review(
    product_id: str,
    payload: ReviewIn,
    backend: BackendClient = Depends(get_backend),
):
    svc = ReviewsAPI(backend)
    try:
        return unwrap(svc.create_review(product_id, payload.rating, payload.comment))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)
