"""Game domain services: odds, bet resolution, game play and the record store.

This package contains the game logic that HTTP routes call into, keeping
transport concerns separated from core game mechanics. Nothing here except
the record store holds shared state.
"""

from .engine import draw_outcome, play, validate_request
from .store import RecordStore, get_store

__all__ = ['draw_outcome', 'play', 'validate_request', 'RecordStore', 'get_store']
