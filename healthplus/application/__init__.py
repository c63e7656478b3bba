"""
Application layer: the store, the workflows that feed it and the bridge that
persists part of its state.
"""

from .consultation_room import ChatMessage, ConsultationRoom
from .context import PendingRegistration, PortalContext
from .persistence_bridge import PersistenceBridge
from .store import Store

__all__ = [
    "Store",
    "PortalContext",
    "PendingRegistration",
    "ConsultationRoom",
    "ChatMessage",
    "PersistenceBridge",
]
