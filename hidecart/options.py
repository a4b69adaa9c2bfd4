# hidecart/options.py
import logging
from typing import Dict, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Option

logger = logging.getLogger(__name__)


class OptionStore(Protocol):
    async def get(self, key: str, default: str = "") -> str: ...

    async def set(self, key: str, value: str) -> None: ...


class SqlOptionStore:
    """Options persisted in the ``options`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str, default: str = "") -> str:
        try:
            result = await self.session.execute(select(Option.value).where(Option.key == key))
        except SQLAlchemyError:
            # reset the failed transaction; the session is shared by the request
            await self.session.rollback()
            raise
        value = result.scalar_one_or_none()
        return default if value is None else value

    async def set(self, key: str, value: str) -> None:
        try:
            option = await self.session.get(Option, key)
            if option is None:
                self.session.add(Option(key=key, value=value))
            else:
                option.value = value
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        logger.info("option %s updated", key)


class MemoryOptionStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    async def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    async def set(self, key: str, value: str) -> None:
        self.values[key] = value
