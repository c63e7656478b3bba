"""
Portal Domain

Snapshot, actions, reducer and derived views of the healthcare portal.
"""

from . import actions, selectors
from .actions import Action, ActionType
from .reducer import reduce
from .snapshot import Snapshot

__all__ = [
    "Action",
    "ActionType",
    "Snapshot",
    "actions",
    "reduce",
    "selectors",
]
