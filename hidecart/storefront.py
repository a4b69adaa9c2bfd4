# hidecart/storefront.py
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from . import config
from .host import CartSnapshot, RequestPageContext, get_cart, get_plugin, navigation
from .plugin import HideCartPlugin

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
router = APIRouter(tags=["pages"])

# demo catalogue for the shop page
PRODUCTS = [
    {"id": 1, "name": "Oil filter"},
    {"id": 2, "name": "Brake pads"},
    {"id": 3, "name": "Wiper blades"},
]


def render_page(
    request: Request,
    template: str,
    plugin: HideCartPlugin,
    cart: CartSnapshot,
    **extra,
):
    page = RequestPageContext(request)
    # template_redirect analogue; raises RedirectRequested on an empty cart page
    plugin.on_request_start(page)

    ctx = {
        "request": request,
        "menu": plugin.on_render_menu(navigation(request), page.cart_url()),
        "footer": Markup(plugin.on_render_footer()),
        "cart": cart,
        "cart_url": page.cart_url(),
        **extra,
    }
    return templates.TemplateResponse(request, template, ctx)


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    plugin: HideCartPlugin = Depends(get_plugin),
    cart: CartSnapshot = Depends(get_cart),
):
    return render_page(request, "index.html", plugin, cart)


@router.get("/shop", response_class=HTMLResponse)
async def shop_page(
    request: Request,
    plugin: HideCartPlugin = Depends(get_plugin),
    cart: CartSnapshot = Depends(get_cart),
):
    return render_page(request, "shop.html", plugin, cart, products=PRODUCTS)


@router.get(config.CART_PATH, response_class=HTMLResponse)
async def cart_page(
    request: Request,
    plugin: HideCartPlugin = Depends(get_plugin),
    cart: CartSnapshot = Depends(get_cart),
):
    return render_page(request, "cart.html", plugin, cart)
