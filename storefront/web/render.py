# storefront/web/render.py
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

templates_dir = Path(__file__).parent / "templates"


def format_price(value: Decimal | int | float | None) -> str:
    """Preco inteiro com sufixo fixo ",00" (centavos nao sao modelados)."""
    # int() trunca: 79.9 aparece como R$79,00
    return f"R${int(value or 0)},00"


env = Environment(
    loader=FileSystemLoader(str(templates_dir)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["preco"] = format_price


def render_loading() -> str:
    return env.get_template("_loading.html").render()


def render_products(products: Iterable) -> str:
    return env.get_template("_products.html").render(products=list(products))


def render_page(view, menu, products_html: str) -> str:
    return env.get_template("catalog.html").render(
        view=view,
        menu=menu,
        products_html=products_html,
    )
