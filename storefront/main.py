# storefront/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from storefront.api.routers import auth, cart, catalog, health, orders, products, profile
from storefront.data.backend import backend
from storefront.services.catalog_service import probe_products
from storefront.services.product_service import ProductsAPI
from storefront.utils.logging import get_logger, setup_logging
from storefront.utils.settings import APP_HOST, APP_PORT, PROBE_ON_STARTUP

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"Backend configurado em {backend.url}")
    if PROBE_ON_STARTUP:
        probe_products(ProductsAPI(backend))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(products.router)
    app.include_router(auth.router)
    app.include_router(cart.router)
    app.include_router(orders.router)
    app.include_router(profile.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
