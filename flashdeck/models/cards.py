from typing import Iterable, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str = Field(..., description="Terme / recto")
    definition: str = Field(..., description="Définition / verso")


DEFAULT_TITLE = "Design System Components"
UNTITLED_TITLE = "Untitled Set"

# Deck de démo chargé quand aucun contenu importé n'est disponible
DEFAULT_CARDS: Tuple[Card, ...] = (
    Card(term="Component", definition="A reusable piece of UI that encapsulates its own structure, style, and behavior"),
    Card(term="Design Token", definition="Named entities that store visual design attributes like colors, typography, and spacing"),
    Card(term="Typography", definition="The art and technique of arranging type to make written language legible and appealing"),
    Card(term="Color System", definition="A structured set of colors used consistently throughout a design system"),
    Card(term="Spacing Scale", definition="A defined set of spacing values used for margins, padding, and gaps"),
    Card(term="Grid System", definition="A structure of horizontal and vertical lines used to arrange content"),
    Card(term="Breakpoint", definition="Specific viewport widths where the layout changes for responsive design"),
    Card(term="Accessibility", definition="The practice of making products usable by people with various abilities"),
)


class CardStore:
    """
    Séquence ordonnée de cartes, jamais vide.
    L'ordre définit la navigation ; le remplacement (import) est atomique.
    """

    def __init__(self, cards: Iterable[Card] = DEFAULT_CARDS):
        self._cards: Tuple[Card, ...] = ()
        self.replace(cards)

    def replace(self, cards: Iterable[Card]) -> None:
        new_cards = tuple(cards)
        if not new_cards:
            raise ValueError("CardStore ne peut pas être vide.")
        self._cards = new_cards

    def as_list(self) -> List[Card]:
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
