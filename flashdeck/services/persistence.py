import json
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from flashdeck.models.cards import Card
from flashdeck.models.session import (
    ContentSnapshot,
    LayoutVariant,
    SessionSnapshot,
    SessionState,
)
from flashdeck.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

SESSION_KEY = "flashcardState"
CONTENT_KEY = "flashcardContent"
LAYOUT_KEY = "designVariant"


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class PersistenceAdapter:
    """
    Trois snapshots indépendants dans le stockage clé/valeur :
    - session  : {currentIndex, starredCards}
    - contenu  : {title, flashcards, savedAt} (après import réussi)
    - layout   : variante sélectionnée
    Toute lecture illisible est traitée comme absente (None), jamais propagée.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    # ---------- lecture ----------

    def _read_json(self, key: str):
        try:
            raw = self.storage.get_item(key)
            if raw is None:
                return None
            return json.loads(raw)
        except (OSError, ValueError) as e:
            logger.warning("Lecture %s impossible (%s). Valeurs par défaut.", key, e)
            return None

    def load_session(self) -> Optional[SessionSnapshot]:
        data = self._read_json(SESSION_KEY)
        if data is None:
            return None
        try:
            return SessionSnapshot.model_validate(data)
        except ValueError as e:
            logger.warning("Snapshot session invalide (%s). Ignoré.", e)
            return None

    def load_content(self) -> Optional[ContentSnapshot]:
        data = self._read_json(CONTENT_KEY)
        if data is None:
            return None
        try:
            snap = ContentSnapshot.model_validate(data)
        except ValueError as e:
            logger.warning("Snapshot contenu invalide (%s). Ignoré.", e)
            return None
        if not snap.flashcards:
            return None
        return snap

    def load_layout(self) -> Optional[LayoutVariant]:
        data = self._read_json(LAYOUT_KEY)
        if data is None:
            return None
        variant = LayoutVariant.parse(data)
        if variant is None:
            logger.warning("Variante persistée inconnue (%r). Ignorée.", data)
        return variant

    # ---------- écriture ----------

    def save_session(self, state: SessionState) -> None:
        snap = SessionSnapshot(
            currentIndex=state.current_index,
            starredCards=sorted(state.starred),
        )
        self.storage.set_item(SESSION_KEY, snap.model_dump_json())

    def save_content(self, title: str, cards: Iterable[Card], saved_at: Optional[str] = None) -> ContentSnapshot:
        snap = ContentSnapshot(
            title=title,
            flashcards=list(cards),
            savedAt=saved_at or utcnow_iso(),
        )
        self.storage.set_item(CONTENT_KEY, snap.model_dump_json())
        return snap

    def save_layout(self, variant: LayoutVariant) -> None:
        self.storage.set_item(LAYOUT_KEY, json.dumps(variant.value))
