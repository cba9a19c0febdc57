from __future__ import annotations
import logging
from typing import Dict, Optional

from core.interfaces import PreferenceStore
from models.preferences import TravelerPreferences

logger = logging.getLogger(__name__)


def default_preferences() -> TravelerPreferences:
    return TravelerPreferences()


def resolve(stored: Optional[TravelerPreferences]) -> TravelerPreferences:
    """Stored record verbatim, or the hard-coded defaults. Never fails."""
    return stored if stored is not None else default_preferences()


def resolve_for_user(
    store: Optional[PreferenceStore], user_id: Optional[str]
) -> TravelerPreferences:
    if store is None or not user_id:
        return default_preferences()
    stored = store.get(user_id)
    if stored is None:
        logger.debug("no stored preferences for user %s, using defaults", user_id)
    return resolve(stored)


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self, records: Optional[Dict[str, TravelerPreferences]] = None):
        self._records: Dict[str, TravelerPreferences] = dict(records or {})

    def get(self, user_id: str) -> Optional[TravelerPreferences]:
        return self._records.get(user_id)
