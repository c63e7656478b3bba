"""
Infrastructure collaborators of the portal core: simulated network, clock and
identifiers, key/value storage and the call timer.
"""

from .call_timer import CallTimer
from .identifiers import IdentifierSource
from .network import simulate_api
from .storage import InMemoryStorage, KeyValueStorage, RedisStorage, create_storage

__all__ = [
    "CallTimer",
    "IdentifierSource",
    "simulate_api",
    "KeyValueStorage",
    "InMemoryStorage",
    "RedisStorage",
    "create_storage",
]
