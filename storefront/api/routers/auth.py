# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends

from storefront.api import unwrap
from storefront.data.backend import get_backend
from storefront.domain.schemas import SignUpIn, SignInIn, ResetPasswordIn
from storefront.services.auth_service import AuthAPI
from storefront.services.backend_client import BackendClient

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_service(backend: BackendClient):
    return AuthAPI(backend)


@router.post("/signup", status_code=201)
def sign_up(payload: SignUpIn, backend: BackendClient = Depends(get_backend)):
    svc = get_service(backend)
    return unwrap(svc.sign_up(payload.email, payload.password, payload.full_name))


@router.post("/signin")
def sign_in(payload: SignInIn, backend: BackendClient = Depends(get_backend)):
    """
    Devolve {user, session}; o access_token vai no header Authorization
    das proximas chamadas.
    """
    svc = get_service(backend)
    return unwrap(svc.sign_in(payload.email, payload.password))


@router.post("/signout", status_code=204)
def sign_out(backend: BackendClient = Depends(get_backend)):
    unwrap(get_service(backend).sign_out())


@router.get("/session")
def get_session(backend: BackendClient = Depends(get_backend)):
    return unwrap(get_service(backend).get_session())


@router.post("/reset-password", status_code=202)
def reset_password(payload: ResetPasswordIn, backend: BackendClient = Depends(get_backend)):
    unwrap(get_service(backend).reset_password(payload.email))
    return {"status": "sent"}
