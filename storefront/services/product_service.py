# storefront/services/product_service.py
from storefront.domain.schemas import ApiResult, ProductFilters
from storefront.services.backend_client import BackendClient


class ProductsAPI:
    """
    Catalogo (somente leitura). Produtos sao criados fora da loja.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    def get_products(self, filters: ProductFilters | dict | None = None) -> ApiResult:
        """
        Lista produtos ativos. Os filtros se combinam com E logico; filtro
        ausente nao restringe nada.
        """
        if not isinstance(filters, ProductFilters):
            filters = ProductFilters.model_validate(filters or {})

        query = self.backend.table("products").select("*").eq("active", True)

        if filters.category:
            query = query.eq("category", filters.category)

        if filters.min_price is not None:
            query = query.gte("price", filters.min_price)

        if filters.max_price is not None:
            query = query.lte("price", filters.max_price)

        if filters.search:
            query = query.ilike("name", f"%{filters.search}%")

        # ordenacao, padrao: mais novos primeiro
        if filters.sort_by:
            query = query.order(filters.sort_by, desc=filters.sort_order != "asc")
        else:
            query = query.order("created_at", desc=True)

        window = filters.window()
        if window:
            query = query.range(*window)

        return self.backend.run(query)

    def get_product(self, product_id: int | str) -> ApiResult:
        return self.backend.run(
            self.backend.table("products")
            .select("*, reviews(*)")
            .eq("id", product_id)
            .single()
        )

    def get_products_by_category(self, category: str, limit: int = 10) -> ApiResult:
        return self.backend.run(
            self.backend.table("products")
            .select("*")
            .eq("category", category)
            .eq("active", True)
            .limit(limit)
        )
