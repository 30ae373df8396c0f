"""
Unit tests for the catalog render loop:
- field-name normalization and defaults
- fallback catalog policy
- in-memory search/category filtering and rendering
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from storefront.domain.schemas import ApiResult, BackendError
from storefront.services.catalog_service import (
    ALL_CATEGORIES,
    FALLBACK_PRODUCTS,
    CatalogPage,
    CatalogStatus,
    filter_products,
    normalize_product,
    probe_products,
)
from storefront.web.render import format_price

LIVE_PRODUCTS = [
    {"id": 10, "name": "Paleteira Manual", "category": "movimentacao", "price": 1500,
     "image": "p.jpg", "description": "2 toneladas"},
    {"id": 11, "name": "Empilhadeira a Gás", "category": "movimentacao", "price": 52000,
     "image": "e.jpg", "description": "GLP"},
    {"id": 12, "name": "Estante de Aço", "category": "armazenagem", "price": 800,
     "image": "s.jpg", "description": "5 níveis"},
]


def products_api_returning(result=None, side_effect=None):
    api = MagicMock()
    api.get_products.return_value = result
    api.get_products.side_effect = side_effect
    return api


class TestNormalizeProduct:

    def test_missing_fields_get_defaults(self):
        prd = normalize_product({})

        assert prd.id is None
        assert prd.name == "Produto"
        assert prd.category == ""
        assert prd.price == 0
        assert prd.image == ""
        assert prd.description == ""

    def test_portuguese_keys(self):
        prd = normalize_product(FALLBACK_PRODUCTS[0])

        assert prd.id == 1
        assert prd.name == "Empilhadeira Elétrica 2,5t"
        assert prd.category == "Equipamentos-e-tecnologia"
        assert prd.price == 7999

    def test_alternate_keys(self):
        prd = normalize_product(
            {"product_id": "abc", "title": "Caixa", "photo": "c.png", "summary": "plástico"}
        )

        assert prd.id == "abc"
        assert prd.name == "Caixa"
        assert prd.image == "c.png"
        assert prd.description == "plástico"

    def test_priority_order(self):
        prd = normalize_product({"nome": "Primeiro", "name": "Segundo", "title": "Terceiro"})

        assert prd.name == "Primeiro"

    def test_empty_value_falls_through(self):
        prd = normalize_product({"nome": "", "name": "Pallet", "preco": 0, "price": 35})

        assert prd.name == "Pallet"
        assert prd.price == 35

    @pytest.mark.parametrize("price", ["sob consulta", "", "NaN", True, None])
    def test_unparseable_price_becomes_zero(self, price):
        prd = normalize_product({"id": 5, "name": "Pallet", "price": price})

        assert prd.price == 0

    def test_numeric_string_price(self):
        assert normalize_product({"preco": "129.90"}).price == Decimal("129.90")


class TestFilterProducts:

    @pytest.fixture
    def products(self):
        return [normalize_product(p) for p in LIVE_PRODUCTS]

    def test_search_is_case_insensitive(self, products):
        names = [p.name for p in filter_products(products, "EMPILHADEIRA", ALL_CATEGORIES)]

        assert names == ["Empilhadeira a Gás"]

    def test_category_and_search_compose(self, products):
        assert filter_products(products, "est", "movimentacao") == []
        assert [p.id for p in filter_products(products, "est", "armazenagem")] == [12]

    def test_all_categories_sentinel(self, products):
        assert len(filter_products(products, "", ALL_CATEGORIES)) == 3


class TestCatalogPageLoad:

    def test_error_uses_fallback(self):
        page = CatalogPage(products_api_returning(ApiResult(error=BackendError(message="boom"))))

        page.load()

        assert page.view.status == CatalogStatus.LOADED_WITH_FALLBACK
        assert [p.name for p in page.view.products] == ["Empilhadeira Elétrica 2,5t"]

    def test_empty_result_uses_fallback(self):
        page = CatalogPage(products_api_returning(ApiResult(data=[])))

        page.load()

        assert page.view.status == CatalogStatus.LOADED_WITH_FALLBACK
        assert len(page.view.products) == 1

    def test_exception_uses_fallback(self):
        page = CatalogPage(products_api_returning(side_effect=RuntimeError("no network")))

        html = page.load()

        assert page.view.status == CatalogStatus.LOADED_WITH_FALLBACK
        assert "Empilhadeira Elétrica 2,5t" in html

    def test_live_data(self):
        api = products_api_returning(ApiResult(data=LIVE_PRODUCTS))
        page = CatalogPage(api)

        html = page.load()

        api.get_products.assert_called_once_with()
        assert page.view.status == CatalogStatus.LOADED
        assert html.count('class="cartao-produto"') == 3

    def test_loading_skeleton_is_shown_before_fetch(self):
        seen = {}
        page = None

        def fetch():
            seen["html"] = page.html
            seen["status"] = page.view.status
            return ApiResult(data=LIVE_PRODUCTS)

        page = CatalogPage(products_api_returning(side_effect=fetch))
        page.load()

        assert "skeleton-card" in seen["html"]
        assert seen["status"] == CatalogStatus.LOADING


class TestCatalogPageEvents:

    @pytest.fixture
    def fallback_page(self):
        page = CatalogPage(products_api_returning(ApiResult(data=[])))
        page.load()
        return page

    @pytest.fixture
    def live_page(self):
        page = CatalogPage(products_api_returning(ApiResult(data=LIVE_PRODUCTS)))
        page.load()
        return page

    def test_search_finds_fallback_item(self, fallback_page):
        html = fallback_page.on_search_input("empilhadeira")

        assert "Empilhadeira Elétrica 2,5t" in html
        assert "R$7999,00" in html

    def test_search_without_match_renders_empty_state(self, fallback_page):
        html = fallback_page.on_search_input("xyz-nomatch")

        assert "Nenhum produto encontrado." in html
        assert "cartao-produto" not in html

    def test_events_do_not_refetch(self, live_page):
        live_page.on_search_input("a")
        live_page.on_category_click("armazenagem")
        live_page.on_category_click(ALL_CATEGORIES)

        live_page.products_api.get_products.assert_called_once()

    def test_category_click_filters(self, live_page):
        html = live_page.on_category_click("armazenagem")

        assert "Estante de Aço" in html
        assert "Paleteira Manual" not in html

    def test_render_is_idempotent(self, live_page):
        live_page.on_search_input("e")
        first = live_page.render()

        assert live_page.render() == first

    def test_none_search_input_clears_filter(self, live_page):
        live_page.on_search_input("paleteira")
        html = live_page.on_search_input(None)

        assert html.count('class="cartao-produto"') == 3

    def test_exactly_one_category_button_active(self, live_page):
        live_page.on_category_click("armazenagem")

        page = live_page.render_page()

        assert page.count("botao-categorias ativo") == 1
        assert 'botao-categorias ativo" data-categoria="armazenagem"' in page

    def test_categories_include_all_sentinel(self, live_page):
        assert live_page.view.categories() == [ALL_CATEGORIES, "armazenagem", "movimentacao"]

    def test_unparseable_price_still_loads(self):
        raw = [{"id": 5, "name": "Pallet", "price": "sob consulta"}]
        page = CatalogPage(products_api_returning(ApiResult(data=raw)))

        html = page.load()

        assert page.view.status == CatalogStatus.LOADED
        assert "R$0,00" in html

    def test_markup_is_escaped(self):
        raw = [{"id": 1, "name": "<script>alert(1)</script>", "price": 5}]
        page = CatalogPage(products_api_returning(ApiResult(data=raw)))

        html = page.load()

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestFormatPrice:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (7999, "R$7999,00"),
            (0, "R$0,00"),
            (None, "R$0,00"),
            (19.99, "R$19,00"),
            (79.9, "R$79,00"),
            (Decimal("129.90"), "R$129,00"),
        ],
    )
    def test_cents_are_truncated_not_rounded(self, value, expected):
        assert format_price(value) == expected


class TestProbe:

    def test_probe_requests_single_item(self):
        api = products_api_returning(ApiResult(data=[{"id": 1}]))

        probe_products(api)

        filters = api.get_products.call_args.args[0]
        assert filters.limit == 1

    def test_probe_never_raises(self):
        probe_products(products_api_returning(side_effect=RuntimeError("down")))
