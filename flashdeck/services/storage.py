import logging
import re
import shutil
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorage:
    """
    Stockage clé/valeur local (équivalent localStorage).
    Une clé = un fichier texte dans base_path ; les valeurs sont des chaînes (JSON côté appelant).
    """

    def __init__(self, base_path: str = "./storage"):
        self.base_path = Path(base_path)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key or ""):
            raise ValueError(f"Clé de stockage invalide: {key!r}")
        return self.base_path / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        self.base_path.mkdir(parents=True, exist_ok=True)
        # écriture synchrone : snapshots de quelques octets, appelée depuis la boucle
        # d'évènements pour garder les mutations de session sérialisées
        # écriture atomique : fichier temporaire puis rename
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)
        logger.debug("storage.set_item %s (%d bytes)", key, len(value))

    def clear_all(self) -> None:
        """
        Supprime toutes les clés (utile pour les tests).
        """
        if self.base_path.exists():
            shutil.rmtree(self.base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
