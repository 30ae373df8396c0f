# storefront/api/__init__.py
from fastapi import HTTPException

from storefront.domain.schemas import ApiResult


def unwrap(result: ApiResult):
    """{data, error} -> data, ou HTTPException com o status do backend."""
    if result.error:
        status = result.error.status or (502 if result.error.code == "FETCH_ERROR" else 400)
        raise HTTPException(status_code=status, detail=result.error.message)
    return result.data
