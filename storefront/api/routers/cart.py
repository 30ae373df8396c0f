# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api import unwrap
from storefront.data.backend import get_backend
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import CartItemIn, CartItemUpdate
from storefront.services.backend_client import BackendClient
from storefront.services.cart_service import CartAPI

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(backend: BackendClient):
    return CartAPI(backend)


@router.get("/")
def get_cart(backend: BackendClient = Depends(get_backend)):
    return unwrap(get_service(backend).get_cart())


@router.post("/items", status_code=201)
def add_item(payload: CartItemIn, backend: BackendClient = Depends(get_backend)):
    svc = get_service(backend)
    try:
        unwrap(svc.add_to_cart(payload.product_id, payload.quantity))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"product_id": payload.product_id, "quantity": payload.quantity}


@router.patch("/items/{product_id}")
def update_item(
    product_id: str,
    payload: CartItemUpdate,
    backend: BackendClient = Depends(get_backend),
):
    svc = get_service(backend)
    try:
        unwrap(svc.update_cart_item(product_id, payload.quantity))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"product_id": product_id, "quantity": payload.quantity}


@router.delete("/items/{product_id}", status_code=204)
def remove_item(product_id: str, backend: BackendClient = Depends(get_backend)):
    svc = get_service(backend)
    try:
        unwrap(svc.remove_from_cart(product_id))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)


@router.delete("/", status_code=204)
def clear_cart(backend: BackendClient = Depends(get_backend)):
    svc = get_service(backend)
    try:
        unwrap(svc.clear_cart())
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)
