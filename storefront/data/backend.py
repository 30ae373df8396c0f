# storefront/data/backend.py
from fastapi import Header

from storefront.services.backend_client import BackendClient
from storefront.utils.settings import SUPABASE_URL, SUPABASE_ANON_KEY
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# handle unico do processo, criado no import e nunca fechado
backend = BackendClient.connect(SUPABASE_URL, SUPABASE_ANON_KEY)


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_backend(authorization: str | None = Header(default=None)) -> BackendClient:
    """
    Dependencia FastAPI: cliente proprio da requisicao com o token de quem
    chamou. A sessao de um login via HTTP nunca fica no handle do processo.
    """
    return BackendClient.connect(SUPABASE_URL, SUPABASE_ANON_KEY, bearer_token(authorization))
