# storefront/services/order_service.py
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import ApiResult, OrderCreate, OrderStatus, PaymentStatus
from storefront.services.backend_client import BackendClient
from storefront.services.cart_service import CartAPI
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrdersAPI:
    """
    Pedidos do usuario autenticado.
    """

    def __init__(self, backend: BackendClient, cart_api: CartAPI | None = None):
        self.backend = backend
        self.cart_api = cart_api or CartAPI(backend)

    def create_order(self, order_data: OrderCreate | dict) -> ApiResult:
        """
        Use Case: criar pedido a partir do checkout.

        1. Exige usuario autenticado
        2. Insere o pedido com status e payment_status "pending"
        3. Se deu certo, limpa o carrinho (passo separado, melhor esforco)
        """
        if not isinstance(order_data, OrderCreate):
            order_data = OrderCreate.model_validate(order_data)

        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("create_order")

        order = {
            "user_id": user["id"],
            "status": OrderStatus.PENDING.value,
            "total": str(order_data.total),
            "items": order_data.items,
            "shipping_address": order_data.shipping_address,
            "payment_method": order_data.payment_method,
            "payment_status": PaymentStatus.PENDING.value,
        }

        result = self.backend.run(self.backend.table("orders").insert([order]))

        # insert devolve as linhas criadas; o pedido e a primeira
        if not result.error:
            result = ApiResult(data=result.data[0] if result.data else None)
            logger.info(f"Pedido {(result.data or {}).get('id')} criado para o usuario {user['id']}")
            self._clear_cart_after_order(user["id"])

        return result

    def _clear_cart_after_order(self, user_id: str) -> None:
        # falha aqui nao volta para quem criou o pedido
        try:
            cleared = self.cart_api.clear_cart()
        except Exception as e:
            logger.warning(f"Pedido criado mas carrinho do usuario {user_id} nao foi limpo: {e}")
            return

        if cleared.error:
            logger.warning(
                f"Pedido criado mas carrinho do usuario {user_id} nao foi limpo: "
                f"{cleared.error.message}"
            )

    def get_user_orders(self) -> ApiResult:
        user = self.backend.auth.current_user()

        if not user:
            return ApiResult(data=[])

        return self.backend.run(
            self.backend.table("orders")
            .select("*")
            .eq("user_id", user["id"])
            .order("created_at", desc=True)
        )

    def get_order(self, order_id: int | str) -> ApiResult:
        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("get_order")

        return self.backend.run(
            self.backend.table("orders")
            .select("*")
            .eq("id", order_id)
            .eq("user_id", user["id"])
            .single()
        )
