# hidecart/cart.py
import logging
import uuid
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from . import config
from .database import get_session
from .host import CartSnapshot, get_cart, get_option_store, get_variant, load_cart, read_selectors
from .models import CartItem
from .options import OptionStore
from .plugin import HideCartPlugin, Variant
from .schemas import CartItemCreate, CartMutationOut, CartOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


def base_fragments(cart: CartSnapshot) -> Dict[str, str]:
    """Fragments the storefront refreshes after every cart change."""
    lines = "".join(
        f'<li class="mini_cart_item">#{item.product_id} &times; {item.quantity}</li>'
        for item in cart.items
    )
    return {
        "span.cart-count": f'<span class="cart-count">{cart.count}</span>',
        "div.widget_shopping_cart_content": (
            f'<div class="widget_shopping_cart_content"><ul class="cart_list">{lines}</ul></div>'
        ),
    }


async def refreshed(
    session: AsyncSession,
    cart_key: str,
    store: OptionStore,
    variant: Variant,
) -> CartMutationOut:
    # reload: the request-scoped snapshot predates the mutation
    cart = await load_cart(session, cart_key)
    plugin = HideCartPlugin(cart, variant, await read_selectors(store))
    return CartMutationOut(count=cart.count, fragments=plugin.on_build_fragments(base_fragments(cart)))


@router.get("", response_model=CartOut)
async def get_cart_contents(cart: CartSnapshot = Depends(get_cart)):
    return {"items": cart.items, "count": cart.count}


@router.get("/fragments", response_model=CartMutationOut)
async def get_refreshed_fragments(
    request: Request,
    session: AsyncSession = Depends(get_session),
    store: OptionStore = Depends(get_option_store),
    variant: Variant = Depends(get_variant),
):
    return await refreshed(session, request.cookies.get(config.CART_COOKIE_NAME), store, variant)


@router.post("/add", response_model=CartMutationOut, status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    payload: CartItemCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_session),
    store: OptionStore = Depends(get_option_store),
    variant: Variant = Depends(get_variant),
):
    if payload.quantity <= 0:
        raise HTTPException(status_code=400, detail="Quantity must be > 0")

    cart_key = request.cookies.get(config.CART_COOKIE_NAME)
    if not cart_key:
        cart_key = uuid.uuid4().hex
        response.set_cookie(config.CART_COOKIE_NAME, cart_key, path="/", httponly=True, samesite="lax")

    res = await session.execute(
        select(CartItem).where(
            CartItem.cart_key == cart_key,
            CartItem.product_id == payload.product_id,
        )
    )
    existing = res.scalar_one_or_none()
    if existing:
        existing.quantity += payload.quantity
    else:
        session.add(CartItem(cart_key=cart_key, product_id=payload.product_id, quantity=payload.quantity))
    await session.commit()
    logger.debug("cart %s: +%d of product %d", cart_key, payload.quantity, payload.product_id)

    return await refreshed(session, cart_key, store, variant)


@router.delete("/{item_id}", response_model=CartMutationOut)
async def remove_cart_item(
    item_id: int,
    request: Request,
    session: AsyncSession = Depends(get_session),
    store: OptionStore = Depends(get_option_store),
    variant: Variant = Depends(get_variant),
):
    cart_key = request.cookies.get(config.CART_COOKIE_NAME)
    res = await session.execute(
        select(CartItem).where(CartItem.id == item_id, CartItem.cart_key == cart_key)
    )
    item = res.scalar_one_or_none()
    if not item:
        raise HTTPException(status_code=404, detail="Cart item not found")

    await session.delete(item)
    await session.commit()
    return await refreshed(session, cart_key, store, variant)
