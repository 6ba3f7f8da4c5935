from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, Field, field_validator

from flashdeck.models.cards import Card


class LayoutVariant(str, Enum):
    default = "default"
    panel = "panel"
    journey = "journey"
    table = "table"
    panel_alt = "panel-alt"

    @classmethod
    def parse(cls, value: object) -> Optional["LayoutVariant"]:
        """Retourne la variante connue, ou None (valeur inconnue)."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


@dataclass
class SessionState:
    current_index: int = 0
    is_flipped: bool = False
    starred: Set[int] = field(default_factory=set)
    layout: LayoutVariant = LayoutVariant.default
    # incrémenté à chaque goTo : déclenche la transition one-shot de la carte
    transition_seq: int = 0


@dataclass
class ViewState:
    """État local aux vues (non persisté)."""
    search_query: str = ""
    table_selection: Set[int] = field(default_factory=set)


# -------------------
# Snapshots persistés
# -------------------
class SessionSnapshot(BaseModel):
    currentIndex: int = 0
    starredCards: List[int] = Field(default_factory=list)

    @field_validator("currentIndex", mode="before")
    @classmethod
    def _none_index(cls, v):
        return 0 if v is None else v

    @field_validator("starredCards", mode="before")
    @classmethod
    def _none_stars(cls, v):
        return [] if v is None else v


class ContentSnapshot(BaseModel):
    title: str
    flashcards: List[Card]
    savedAt: str
