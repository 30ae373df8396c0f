"""
Logging da loja.

Todos os modulos usam `get_logger(__name__)`. `setup_logging()` e chamado uma
vez na subida da aplicacao e, com LOG_MASK_SECRETS ligado, instala um filtro
que mascara tokens, chaves e e-mails antes de qualquer handler escrever.
"""

import logging
import re
from typing import Pattern

from storefront.utils import settings


class SecretMaskingFilter(logging.Filter):
    """
    Substitui valores sensiveis por [REDACTED_*].

    Cobre tokens Bearer, chaves de API (apikey), senhas, access/refresh tokens
    e enderecos de e-mail.
    """

    PATTERNS: list[tuple[Pattern, str]] = [
        (re.compile(r'(Bearer\s+)([A-Za-z0-9_\-\.]+)', re.IGNORECASE), r'\1[REDACTED_BEARER_TOKEN]'),
        (re.compile(r'(api[_-]?key["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-\.]{16,})(["\']?)', re.IGNORECASE), r'\1[REDACTED_API_KEY]\3'),
        (re.compile(r'((?:access|refresh)_token["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-\.]+)(["\']?)', re.IGNORECASE), r'\1[REDACTED_TOKEN]\3'),
        (re.compile(r'(password["\']?\s*[:=]\s*["\']?)([^\s"\',}]+)(["\']?)', re.IGNORECASE), r'\1[REDACTED_PASSWORD]\3'),
        (re.compile(r'\b([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})\b'), '[REDACTED_EMAIL]'),
    ]

    def mask(self, value: str) -> str:
        for pattern, replacement in self.PATTERNS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        if record.msg:
            record.msg = self.mask(str(record.msg))

        if record.args:
            record.args = tuple(
                self.mask(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging() -> None:
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(name)-32s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    if settings.LOG_MASK_SECRETS:
        console_handler.addFilter(SecretMaskingFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # evita handlers duplicados quando o app sobe de novo (reload)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(console_handler)

    logging.info(
        f"Logging inicializado: Level={settings.LOG_LEVEL}, "
        f"Masking={'ENABLED' if settings.LOG_MASK_SECRETS else 'DISABLED'}"
    )
