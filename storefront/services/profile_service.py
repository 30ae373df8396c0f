# storefront/services/profile_service.py
from storefront.domain.errors import NotAuthenticatedError
from storefront.domain.schemas import ApiResult, ProfileUpdate
from storefront.services.backend_client import BackendClient


class ProfileAPI:
    def __init__(self, backend: BackendClient):
        self.backend = backend

    def get_profile(self) -> ApiResult:
        user = self.backend.auth.current_user()

        if not user:
            return ApiResult(data=None)

        return self.backend.run(
            self.backend.table("profiles")
            .select("*")
            .eq("id", user["id"])
            .single()
        )

    def update_profile(self, profile_data: ProfileUpdate | dict) -> ApiResult:
        if isinstance(profile_data, ProfileUpdate):
            profile_data = profile_data.model_dump(exclude_unset=True)

        user = self.backend.auth.current_user()
        if not user:
            raise NotAuthenticatedError("update_profile")

        result = self.backend.run(
            self.backend.table("profiles")
            .update(profile_data)
            .eq("id", user["id"])
        )
        if result.error:
            return result
        return ApiResult(data=result.data[0] if result.data else None)
