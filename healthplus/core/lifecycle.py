"""
Application lifecycle for the portal API.

Startup builds the portal context, restores the persisted user and cart and
starts mirroring changes back to storage. Shutdown stops the call timer and
detaches the persistence bridge.
"""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI

from healthplus.application import PersistenceBridge, PortalContext
from healthplus.config.settings import Settings
from healthplus.infrastructure import IdentifierSource, KeyValueStorage, create_storage

logger = logging.getLogger(__name__)


class PortalLifecycle:
    """
    Owns the portal context for the lifetime of one application instance.

    Args:
        settings: Application settings
        ids: Clock and identifier source (tests pin it)
        storage: Key/value storage; built from settings when omitted
    """

    def __init__(
        self,
        settings: Settings,
        ids: IdentifierSource | None = None,
        storage: KeyValueStorage | None = None,
    ) -> None:
        self._settings = settings
        self._ids = ids
        self._storage = storage
        self.context: PortalContext | None = None
        self._bridge: PersistenceBridge | None = None

    async def startup(self) -> PortalContext:
        if self.context is not None:
            logger.warning("Portal already started, skipping startup")
            return self.context

        logger.info("Starting portal...")
        context = PortalContext.create(self._settings, ids=self._ids)
        storage = self._storage if self._storage is not None else create_storage(self._settings)

        self._bridge = PersistenceBridge(
            store=context.store,
            storage=storage,
            ids=context.ids,
            user_key=self._settings.USER_STORAGE_KEY,
            cart_key=self._settings.CART_STORAGE_KEY,
            session_lifetime_days=self._settings.SESSION_LIFETIME_DAYS,
        )
        self._bridge.rehydrate()
        self._bridge.attach()

        self.context = context
        logger.info(f"Portal started with {self._settings.STORAGE_BACKEND} storage")
        return context

    async def shutdown(self) -> None:
        if self.context is None:
            logger.warning("Portal not started, skipping shutdown")
            return

        logger.info("Stopping portal...")
        await self.context.room.close()
        if self._bridge is not None:
            self._bridge.detach()
            self._bridge = None
        self.context = None
        logger.info("Portal stopped")


def build_lifespan(lifecycle: PortalLifecycle) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Wrap a :class:`PortalLifecycle` in a FastAPI lifespan context manager."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        app.state.portal = await lifecycle.startup()

        yield  # Application runs here

        await lifecycle.shutdown()
        app.state.portal = None

    return lifespan
