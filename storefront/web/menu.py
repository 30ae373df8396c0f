# storefront/web/menu.py
from enum import Enum

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class MenuState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    CLOSING = "closing"


class ClickTarget(str, Enum):
    TRIGGER = "trigger"
    PANEL = "panel"
    OUTSIDE = "outside"


class UserMenu:
    """
    Dropdown do usuario.

    closed -> open no clique do icone; clique fora com o painel aberto
    inicia o fechamento uma unica vez; o painel so some no fim da animacao.
    """

    def __init__(self):
        self.state = MenuState.CLOSED

    @property
    def css_classes(self) -> list[str]:
        if self.state == MenuState.OPEN:
            return ["ativo"]
        if self.state == MenuState.CLOSING:
            return ["ativo", "saindo"]
        return []

    def on_trigger_click(self) -> None:
        # durante o fechamento o painel continua saindo
        if self.state == MenuState.CLOSED:
            self.state = MenuState.OPEN

    def on_document_click(self, target: ClickTarget) -> bool:
        """Retorna True quando este clique iniciou o fechamento."""
        if self.state != MenuState.OPEN:
            return False
        if target in (ClickTarget.TRIGGER, ClickTarget.PANEL):
            return False

        self.state = MenuState.CLOSING
        logger.debug("Menu do usuario fechando")
        return True

    def on_animation_end(self) -> None:
        if self.state == MenuState.CLOSING:
            self.state = MenuState.CLOSED
