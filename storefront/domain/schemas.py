# storefront/domain/schemas.py
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Annotated, Any, List, Literal
from decimal import Decimal


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class BackendError(BaseModel):
    """Erro devolvido pelo backend (ou pelo transporte)."""

    message: str
    code: str | None = None
    details: Any = None
    hint: str | None = None
    status: int | None = None


class ApiResult(BaseModel):
    """Formato uniforme de retorno da fachada: {data, error}."""

    data: Any = None
    error: BackendError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AuthSession(BaseModel):
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str = "bearer"
    user: dict[str, Any] | None = None


class ProductFilters(BaseModel):
    """Configuracao da listagem de produtos. Campos ausentes nao filtram nada."""

    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: Literal["asc", "desc"] | None = None
    page: int | None = Field(None, gt=0)
    limit: int | None = Field(None, gt=0)

    def window(self) -> tuple[int, int] | None:
        """Intervalo inclusivo (base zero) da pagina, so com page e limit."""
        if self.page is None or self.limit is None:
            return None
        start = (self.page - 1) * self.limit
        return start, start + self.limit - 1


class CartItemIn(BaseModel):
    # id inteiro ou uuid, conforme a tabela do backend
    product_id: Annotated[int, Field(gt=0)] | Annotated[str, Field(min_length=1)] = Field(
        ..., description="ID do produto"
    )
    quantity: int = Field(1, gt=0, description="Quantidade (> 0)")


class CartItemUpdate(BaseModel):
    quantity: int = Field(..., gt=0, description="Quantidade (> 0)")


class OrderCreate(BaseModel):
    """Dados do pedido vindos do checkout."""

    total: Decimal = Field(..., ge=0)
    items: List[dict[str, Any]]
    shipping_address: dict[str, Any] | str
    payment_method: str = Field(..., min_length=1)


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(None, min_length=1, max_length=120)
    phone: str | None = None
    avatar_url: str | None = None


class ReviewIn(BaseModel):
    rating: int = Field(..., ge=1, le=5, description="Nota de 1 a 5")
    comment: str | None = None


class SignUpIn(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1, max_length=120)


class SignInIn(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class ResetPasswordIn(BaseModel):
    email: str = Field(..., min_length=3)


class CatalogProduct(BaseModel):
    """Produto canonico, depois da normalizacao dos nomes de campo."""

    id: Any = None
    name: str = "Produto"
    category: str = ""
    price: Decimal | int | float = 0
    image: str = ""
    description: str = ""

    model_config = ConfigDict(frozen=True)
