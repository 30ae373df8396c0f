# storefront/api/routers/profile.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api import unwrap
from storefront.data.backend import get_backend
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import ProfileUpdate
from storefront.services.backend_client import BackendClient
from storefront.services.profile_service import ProfileAPI

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("/")
def get_profile(backend: BackendClient = Depends(get_backend)):
    return unwrap(ProfileAPI(backend).get_profile())


@router.patch("/")
def update_profile(payload: ProfileUpdate, backend: BackendClient = Depends(get_backend)):
    fields = payload.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=400, detail="Nenhum campo para atualizar")

    try:
        return unwrap(ProfileAPI(backend).update_profile(fields))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=e.message)
