# storefront/services/catalog_service.py
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable

from storefront.domain.schemas import CatalogProduct, ProductFilters
from storefront.services.product_service import ProductsAPI
from storefront.web.menu import UserMenu
from storefront.web.render import render_loading, render_products, render_page
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# botao "todas as categorias"
ALL_CATEGORIES = "todos"

# catalogo de exemplo quando o backend falha ou volta vazio
FALLBACK_PRODUCTS: list[dict[str, Any]] = [
    {
        "id": 1,
        "nome": "Empilhadeira Elétrica 2,5t",
        "categoria": "Equipamentos-e-tecnologia",
        "preco": 7999,
        "imagem": "https://armac.com.br/wordpress/wp-content/uploads/2022/06/armac-empilhadeira-eletrica-toyota-btreflex-blog.jpg",
        "descricao": "Equipamento para movimentação e armazenamento de cargas.",
    },
]

# campo canonico -> (chaves candidatas em ordem de prioridade, padrao)
FIELD_CANDIDATES: dict[str, tuple[tuple[str, ...], Any]] = {
    "id": (("id", "id_product", "product_id"), None),
    "name": (("nome", "name", "title"), "Produto"),
    "category": (("categoria", "category"), ""),
    "price": (("preco", "price"), 0),
    "image": (("imagem", "image", "photo"), ""),
    "description": (("descricao", "description", "summary"), ""),
}


class CatalogStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    LOADED_WITH_FALLBACK = "loaded-with-fallback"


def _first_present(raw: dict, keys: Iterable[str], default: Any) -> Any:
    # valor vazio (None, "", 0) cai para a proxima chave
    for key in keys:
        value = raw.get(key)
        if value:
            return value
    return default


def _to_price(value: Any) -> Decimal | int | float:
    # preco ilegivel ("sob consulta", NaN) vira 0
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            return 0
    return number if Decimal(str(number)).is_finite() else 0


def normalize_product(raw: dict) -> CatalogProduct:
    """Registro cru do backend (nomes de campo variados) -> CatalogProduct."""
    values = {
        name: _first_present(raw, keys, default)
        for name, (keys, default) in FIELD_CANDIDATES.items()
    }
    for name in ("name", "category", "image", "description"):
        values[name] = str(values[name])
    values["price"] = _to_price(values["price"])
    return CatalogProduct(**values)


def filter_products(
    products: Iterable[CatalogProduct],
    search_text: str,
    category: str,
) -> list[CatalogProduct]:
    needle = (search_text or "").lower()
    return [
        p for p in products
        if needle in p.name.lower()
        and (category == ALL_CATEGORIES or p.category == category)
    ]


@dataclass
class CatalogView:
    """Estado da vitrine numa sessao: produtos ja normalizados e os filtros."""

    status: CatalogStatus = CatalogStatus.LOADING
    products: list[CatalogProduct] = field(default_factory=list)
    search_text: str = ""
    category: str = ALL_CATEGORIES

    def visible_products(self) -> list[CatalogProduct]:
        return filter_products(self.products, self.search_text, self.category)

    def categories(self) -> list[str]:
        names = [ALL_CATEGORIES] + sorted({p.category for p in self.products if p.category})
        if self.category not in names:
            names.append(self.category)
        return names


class CatalogPage:
    """
    Vitrine: carrega uma vez, filtra e renderiza em memoria.

    Busca e clique de categoria so re-renderizam a lista ja carregada,
    nunca buscam de novo no backend.
    """

    def __init__(self, products_api: ProductsAPI, menu: UserMenu | None = None):
        self.products_api = products_api
        self.menu = menu or UserMenu()
        self.view = CatalogView()
        self.html = ""

    def load(self) -> str:
        self.view.status = CatalogStatus.LOADING
        self.html = render_loading()

        raw, used_fallback = self._fetch_products()

        self.view.products = [normalize_product(p) for p in raw]
        self.view.status = (
            CatalogStatus.LOADED_WITH_FALLBACK if used_fallback else CatalogStatus.LOADED
        )
        logger.info(f"Vitrine carregada: {len(self.view.products)} produtos ({self.view.status.value})")

        return self.render()

    def _fetch_products(self) -> tuple[list[dict], bool]:
        try:
            result = self.products_api.get_products()
        except Exception as e:
            logger.error(f"Falha ao conectar com API: {e}")
            return FALLBACK_PRODUCTS, True

        if result.error:
            logger.error(f"Erro ao buscar produtos no backend: {result.error.message}")
            return FALLBACK_PRODUCTS, True

        if not result.data:
            return FALLBACK_PRODUCTS, True

        return result.data, False

    # eventos de UI
    def on_search_input(self, value: str | None) -> str:
        self.view.search_text = (value or "").lower()
        return self.render()

    def on_category_click(self, category: str) -> str:
        self.view.category = category
        return self.render()

    def render(self) -> str:
        self.html = render_products(self.view.visible_products())
        return self.html

    def render_page(self) -> str:
        return render_page(self.view, self.menu, self.html)


def probe_products(products_api: ProductsAPI) -> None:
    """Teste de busca na subida: so registra no log, nunca levanta."""
    try:
        result = products_api.get_products(ProductFilters(limit=1))
    except Exception as e:
        logger.error(f"Teste de busca -> falha: {e}")
        return

    if result.error:
        logger.error(f"Teste de busca -> erro: {result.error.message}")
    else:
        logger.info(f"Teste de busca -> {len(result.data or [])} produto(s)")
