# storefront/services/auth_service.py
from storefront.domain.schemas import ApiResult
from storefront.services.backend_client import BackendClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AuthAPI:
    """
    Autenticacao: cadastro, login, logout, sessao e recuperacao de senha.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    def sign_up(self, email: str, password: str, full_name: str) -> ApiResult:
        """
        Cadastra o usuario e cria a linha em `profiles`.

        O perfil e um segundo passo, nao atomico com o cadastro: se falhar,
        so fica no log e o resultado do cadastro volta intacto.
        """
        result = self.backend.auth.sign_up(
            email,
            password,
            data={"full_name": full_name},
        )

        user = (result.data or {}).get("user")
        if not result.error and user:
            self._create_profile(user["id"], full_name)

        return result

    def _create_profile(self, user_id: str, full_name: str) -> None:
        try:
            profile = self.backend.run(
                self.backend.table("profiles").insert([{"id": user_id, "full_name": full_name}])
            )
        except Exception as e:
            logger.warning(f"Falha ao criar perfil do usuario {user_id}: {e}")
            return

        if profile.error:
            logger.warning(
                f"Falha ao criar perfil do usuario {user_id}: {profile.error.message}"
            )
        else:
            logger.info(f"Perfil criado para o usuario {user_id}")

    def sign_in(self, email: str, password: str) -> ApiResult:
        return self.backend.auth.sign_in_with_password(email, password)

    def sign_out(self) -> ApiResult:
        return self.backend.auth.sign_out()

    def get_session(self) -> ApiResult:
        return self.backend.auth.get_session()

    def reset_password(self, email: str) -> ApiResult:
        return self.backend.auth.reset_password_for_email(email)
