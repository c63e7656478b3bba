"""
Persistence Bridge

Externalizes the "current user" and "current cart" slices of the snapshot to
key/value storage and restores them when the process starts.
"""

import json
import logging
from collections.abc import Callable
from datetime import timedelta

from healthplus.domain.actions import Login, RestoreCart
from healthplus.domain.entities import Session, User
from healthplus.domain.snapshot import Snapshot
from healthplus.infrastructure.identifiers import IdentifierSource
from healthplus.infrastructure.storage import KeyValueStorage

from .store import Store

logger = logging.getLogger(__name__)

RESTORED_SESSION_TOKEN = "saved_token"


class PersistenceBridge:
    """
    Keeps storage in sync with the user and cart slices.

    - A present user is written as JSON under ``user_key``; logging out
      erases it.
    - A non-empty cart is written as ``{product_id: quantity}`` JSON under
      ``cart_key``; an empty cart erases the key instead of storing ``{}``.
    """

    def __init__(
        self,
        store: Store,
        storage: KeyValueStorage,
        ids: IdentifierSource,
        user_key: str = "healthcare_user",
        cart_key: str = "healthcare_cart",
        session_lifetime_days: int = 7,
    ):
        self.store = store
        self.storage = storage
        self.ids = ids
        self.user_key = user_key
        self.cart_key = cart_key
        self.session_lifetime_days = session_lifetime_days
        self._unsubscribe: Callable[[], None] | None = None

    def attach(self) -> None:
        """Start mirroring snapshot changes into storage."""
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self._on_change)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def rehydrate(self) -> Snapshot:
        """
        Restore the persisted user and cart into the store.

        A stored user is logged back in with a fresh session; corrupt entries
        are logged and skipped.
        """
        actions = []

        user = self._load_user()
        if user is not None:
            now = self.ids.now()
            session = Session(
                token=RESTORED_SESSION_TOKEN,
                expires_at=now + timedelta(days=self.session_lifetime_days),
                last_login=now,
            )
            actions.append(Login(user=user, session=session))

        cart = self._load_cart()
        if cart:
            actions.append(RestoreCart(cart=cart))

        if actions:
            logger.info(f"Rehydrated {'user' if user else 'no user'} and {len(cart)} cart line(s)")
        return self.store.dispatch_all(actions)

    def _on_change(self, previous: Snapshot, current: Snapshot) -> None:
        if current.user is not previous.user:
            self.save_user(current)
        if current.cart is not previous.cart:
            self.save_cart(current)

    def save_user(self, snapshot: Snapshot) -> None:
        if snapshot.user is None:
            self.storage.delete(self.user_key)
        else:
            self.storage.set(self.user_key, json.dumps(snapshot.user.to_dict()))

    def save_cart(self, snapshot: Snapshot) -> None:
        if snapshot.cart:
            self.storage.set(self.cart_key, json.dumps(dict(snapshot.cart)))
        else:
            self.storage.delete(self.cart_key)

    def _load_user(self) -> User | None:
        raw = self.storage.get(self.user_key)
        if not raw:
            return None
        try:
            return User.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Ignoring corrupt persisted user: {e}")
            return None

    def _load_cart(self) -> dict[str, int]:
        raw = self.storage.get(self.cart_key)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
            return {str(product_id): int(quantity) for product_id, quantity in data.items()}
        except (ValueError, AttributeError, TypeError) as e:
            logger.error(f"Ignoring corrupt persisted cart: {e}")
            return {}
