# storefront/services/review_service.py
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import ApiResult, ReviewIn
from storefront.services.backend_client import BackendClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewsAPI:
    """
    Avaliacoes de produto. Leitura publica, escrita so autenticado.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    def create_review(self, product_id: int | str, rating: int, comment: str | None = None) -> ApiResult:
        review = ReviewIn(rating=rating, comment=comment)

        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("create_review")

        logger.info(f"Avaliacao {review.rating} do usuario {user['id']} para o produto {product_id}")

        return self.backend.run(
            self.backend.table("reviews").insert(
                [
                    {
                        "user_id": user["id"],
                        "product_id": product_id,
                        "rating": review.rating,
                        "comment": review.comment,
                    }
                ]
            )
        )

    def get_product_reviews(self, product_id: int | str) -> ApiResult:
        return self.backend.run(
            self.backend.table("reviews")
            .select(
                """
                *,
                profiles:user_id (full_name)
                """
            )
            .eq("product_id", product_id)
            .order("created_at", desc=True)
        )
