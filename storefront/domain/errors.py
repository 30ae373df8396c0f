"""
Excecoes da loja.
"""


class StorefrontError(Exception):
    """
    Base para os erros proprios da loja.

    Attributes:
        message: mensagem legivel
        details: contexto opcional (ids, operacao, etc.)
    """

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotAuthenticatedError(StorefrontError):
    """Operacao que exige dono chamada sem usuario autenticado."""

    def __init__(self, operation: str | None = None):
        details = {"operation": operation} if operation else None
        super().__init__("Usuário não autenticado", details)
