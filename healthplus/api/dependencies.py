"""
FastAPI dependencies.

The portal context is created by the application lifespan and stored on
``app.state``; routes receive it (or pieces of it) through these functions.
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from healthplus.application import PortalContext, Store
from healthplus.domain.entities import User

logger = logging.getLogger(__name__)


def get_context(request: Request) -> PortalContext:
    context = getattr(request.app.state, "portal", None)
    if context is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Portal is not initialized")
    return context


def get_store(context: PortalContext = Depends(get_context)) -> Store:
    return context.store


def get_current_user(store: Store = Depends(get_store)) -> User:
    """Return the signed-in user or answer 401."""
    user = store.snapshot.user
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        logger.warning(f"Admin route denied for {user.id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user
