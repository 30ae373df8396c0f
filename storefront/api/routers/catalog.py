# storefront/api/routers/catalog.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from storefront.data.backend import get_backend
from storefront.services.backend_client import BackendClient
from storefront.services.catalog_service import CatalogPage, ALL_CATEGORIES
from storefront.services.product_service import ProductsAPI

router = APIRouter(tags=["catalog"])


def get_page(backend: BackendClient, q: str | None, categoria: str) -> CatalogPage:
    page = CatalogPage(ProductsAPI(backend))
    page.load()
    # repete os eventos da pagina: busca e clique de categoria
    if q:
        page.on_search_input(q)
    if categoria != ALL_CATEGORIES:
        page.on_category_click(categoria)
    return page


@router.get("/", response_class=HTMLResponse)
def catalog_page(
    q: str | None = Query(None, description="Texto de busca"),
    categoria: str = Query(ALL_CATEGORIES),
    backend: BackendClient = Depends(get_backend),
):
    page = get_page(backend, q, categoria)
    return HTMLResponse(page.render_page())


@router.get("/produtos", response_class=HTMLResponse)
def catalog_grid(
    q: str | None = Query(None),
    categoria: str = Query(ALL_CATEGORIES),
    backend: BackendClient = Depends(get_backend),
):
    """So o grid de produtos, para trocar via fetch no navegador."""
    page = get_page(backend, q, categoria)
    return HTMLResponse(page.html)
