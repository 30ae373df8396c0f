# storefront/services/cart_service.py
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import ApiResult
from storefront.services.backend_client import BackendClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise ValueError("Quantidade deve ser um inteiro maior que 0")


class CartAPI:
    """
    Carrinho do usuario autenticado.

    No maximo uma linha por (user_id, product_id). Leitura sem usuario
    devolve lista vazia; alteracoes sem usuario levantam NotAuthenticatedError
    antes de qualquer requisicao.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    # =====================================================
    # QUERY
    # =====================================================
    def get_cart(self) -> ApiResult:
        user = self.backend.auth.current_user()

        if not user:
            return ApiResult(data=[])

        return self.backend.run(
            self.backend.table("cart_items")
            .select(
                """
                *,
                products:product_id (*)
                """
            )
            .eq("user_id", user["id"])
        )

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_to_cart(self, product_id: int | str, quantity: int = 1) -> ApiResult:
        _check_quantity(quantity)

        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("add_to_cart")

        logger.info(f"Produto {product_id} (x{quantity}) no carrinho do usuario {user['id']}")

        # upsert: a quantidade substitui a existente
        return self.backend.run(
            self.backend.table("cart_items").upsert(
                {
                    "user_id": user["id"],
                    "product_id": product_id,
                    "quantity": quantity,
                },
                on_conflict="user_id,product_id",
            )
        )

    def remove_from_cart(self, product_id: int | str) -> ApiResult:
        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("remove_from_cart")

        result = self.backend.run(
            self.backend.table("cart_items")
            .delete()
            .eq("user_id", user["id"])
            .eq("product_id", product_id)
        )
        return ApiResult(error=result.error)

    def update_cart_item(self, product_id: int | str, quantity: int) -> ApiResult:
        _check_quantity(quantity)

        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("update_cart_item")

        result = self.backend.run(
            self.backend.table("cart_items")
            .update({"quantity": quantity})
            .eq("user_id", user["id"])
            .eq("product_id", product_id)
        )
        return ApiResult(error=result.error)

    def clear_cart(self) -> ApiResult:
        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("clear_cart")

        logger.info(f"Limpando carrinho do usuario {user['id']}")

        result = self.backend.run(
            self.backend.table("cart_items")
            .delete()
            .eq("user_id", user["id"])
        )
        return ApiResult(error=result.error)
