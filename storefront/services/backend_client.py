# storefront/services/backend_client.py
"""
Adaptador sobre o cliente oficial (supabase-py).

O SDK levanta excecoes; a loja trabalha com ApiResult {data, error}. Aqui
ficam so essa conversao e o token de quem chamou. Protocolo, sessao,
refresh e reconexao sao do SDK.
"""
import httpx
from supabase import AuthError, Client, PostgrestAPIError, create_client
from supabase.client import ClientOptions

from storefront.domain.schemas import ApiResult, AuthSession, BackendError
from storefront.utils.logging import get_logger
from storefront.utils.settings import BACKEND_TIMEOUT

logger = get_logger(__name__)

# erro de transporte (rede, corpo ilegivel), sem resposta do backend
FETCH_ERROR = "FETCH_ERROR"
# .single() sem nenhuma linha
NO_ROWS = "PGRST116"


def _dump(model) -> dict | None:
    if model is None:
        return None
    return model.model_dump(mode="json")


def _query_error(e: PostgrestAPIError) -> BackendError:
    return BackendError(
        message=e.message or str(e),
        code=e.code,
        details=e.details,
        hint=e.hint,
    )


def _auth_error(e: AuthError) -> BackendError:
    return BackendError(
        message=e.message,
        code=getattr(e, "code", None),
        status=getattr(e, "status", None),
    )


def _fetch_error(e: Exception) -> BackendError:
    return BackendError(message=str(e) or e.__class__.__name__, code=FETCH_ERROR)


class BackendAuth:
    """
    Operacoes de autenticacao do SDK devolvendo ApiResult.

    Com access_token (vindo do header Authorization) o usuario e resolvido
    por esse token; sem ele, pela sessao guardada no proprio cliente.
    """

    def __init__(self, client: Client, access_token: str | None = None):
        self.client = client
        self.access_token = access_token

    def _call(self, operation: str, fn, *args):
        try:
            return fn(*args), None
        except AuthError as e:
            logger.warning(f"Auth {operation} falhou: {e.message}")
            return None, _auth_error(e)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Auth {operation} sem resposta do backend: {e}")
            return None, _fetch_error(e)

    def sign_up(self, email: str, password: str, data: dict | None = None) -> ApiResult:
        response, error = self._call(
            "sign_up",
            self.client.auth.sign_up,
            {"email": email, "password": password, "options": {"data": data or {}}},
        )
        if error:
            return ApiResult(data={"user": None, "session": None}, error=error)
        return ApiResult(data={"user": _dump(response.user), "session": _dump(response.session)})

    def sign_in_with_password(self, email: str, password: str) -> ApiResult:
        response, error = self._call(
            "sign_in",
            self.client.auth.sign_in_with_password,
            {"email": email, "password": password},
        )
        if error:
            return ApiResult(data={"user": None, "session": None}, error=error)

        logger.info(f"Login de {email}")
        return ApiResult(data={"user": _dump(response.user), "session": _dump(response.session)})

    def sign_out(self) -> ApiResult:
        # token de outra requisicao: revoga no backend; sessao local sempre limpa
        if self.access_token:
            _, error = self._call("sign_out", self.client.auth.admin.sign_out, self.access_token)
            if error:
                return ApiResult(error=error)

        _, error = self._call("sign_out", self.client.auth.sign_out)
        return ApiResult(error=error)

    def get_session(self) -> ApiResult:
        session, error = self._call("get_session", self.client.auth.get_session)
        if error:
            return ApiResult(data={"session": None}, error=error)

        data = _dump(session)
        if data is None and self.access_token:
            data = AuthSession(access_token=self.access_token).model_dump()
        return ApiResult(data={"session": data})

    def get_user(self) -> ApiResult:
        """Sem token e sem sessao o SDK devolve None sem ir a rede."""
        args = (self.access_token,) if self.access_token else ()
        response, error = self._call("get_user", self.client.auth.get_user, *args)
        user = _dump(response.user) if response else None
        return ApiResult(data={"user": user}, error=error)

    def current_user(self) -> dict | None:
        result = self.get_user()
        if result.error:
            logger.warning(f"Nao foi possivel obter o usuario atual: {result.error.message}")
            return None
        return result.data["user"]

    def reset_password_for_email(self, email: str) -> ApiResult:
        _, error = self._call(
            "reset_password",
            self.client.auth.reset_password_for_email,
            email,
        )
        if not error:
            logger.info(f"Recuperacao de senha pedida para {email}")
        return ApiResult(data={}, error=error)


class BackendClient:
    """
    Handle do backend usado pela fachada.

    table() devolve o query builder do SDK; run() executa e converte a
    resposta (ou a excecao) em ApiResult. Nenhuma leitura levanta por falha
    do backend.
    """

    def __init__(self, client: Client, url: str, access_token: str | None = None):
        self.client = client
        self.url = url
        self.access_token = access_token
        self.auth = BackendAuth(client, access_token)

    @classmethod
    def connect(cls, url: str, key: str, access_token: str | None = None) -> "BackendClient":
        options = ClientOptions(postgrest_client_timeout=BACKEND_TIMEOUT)
        if access_token:
            # consultas saem com o JWT de quem chamou (RLS do backend)
            options.headers["Authorization"] = f"Bearer {access_token}"
        return cls(create_client(url, key, options=options), url, access_token)

    def table(self, name: str):
        return self.client.table(name)

    def run(self, query) -> ApiResult:
        try:
            response = query.execute()
        except PostgrestAPIError as e:
            logger.warning(f"Backend respondeu com erro: {e.message} ({e.code})")
            return ApiResult(error=_query_error(e))
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Falha ao falar com o backend: {e}")
            return ApiResult(error=_fetch_error(e))

        return ApiResult(data=response.data)
