# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api import unwrap
from storefront.data.backend import get_backend
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import OrderCreate
from storefront.services.backend_client import NO_ROWS, BackendClient
from storefront.services.order_service import OrdersAPI

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(backend: BackendClient):
    return OrdersAPI(backend)


@router.post("/", status_code=201)
def create_order(payload: OrderCreate, backend: BackendClient = Depends(get_backend)):
    """
    Cria o pedido e limpa o carrinho em seguida.
    Se a limpeza falhar o pedido continua criado.
    """
    svc = get_service(backend)
    try:
        return unwrap(svc.create_order(payload))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)


@router.get("/")
def list_orders(backend: BackendClient = Depends(get_backend)):
    return unwrap(get_service(backend).get_user_orders())


@router.get("/{order_id}")
def get_order(order_id: str, backend: BackendClient = Depends(get_backend)):
    svc = get_service(backend)
    try:
        result = svc.get_order(order_id)
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)

    if result.error and result.error.code == NO_ROWS:
        raise HTTPException(status_code=404, detail="Pedido não encontrado")
    return unwrap(result)
