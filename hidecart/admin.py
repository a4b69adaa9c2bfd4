# hidecart/admin.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from . import config
from .auth import require_admin
from .host import get_option_store, get_variant, read_selectors
from .options import OptionStore
from .plugin import Variant
from .schemas import SelectorSettingsIn, SelectorSettingsOut
from .selector_set import compute, sanitize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def settings_out(raw: str, variant: Variant) -> SelectorSettingsOut:
    return SelectorSettingsOut(selectors=raw, effective=list(compute(raw)), variant=variant.value)


@router.get("/settings", response_model=SelectorSettingsOut)
async def get_settings(
    store: OptionStore = Depends(get_option_store),
    variant: Variant = Depends(get_variant),
):
    return settings_out(await read_selectors(store), variant)


@router.put("/settings", response_model=SelectorSettingsOut)
async def update_settings(
    payload: SelectorSettingsIn,
    store: OptionStore = Depends(get_option_store),
    variant: Variant = Depends(get_variant),
):
    value = sanitize(payload.selectors)
    try:
        await store.set(config.SELECTORS_OPTION, value)
    except SQLAlchemyError:
        logger.exception("could not save %s", config.SELECTORS_OPTION)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Settings storage temporarily unavailable",
        )
    logger.info("hidden cart selectors set to %r", value)
    return settings_out(value, variant)
