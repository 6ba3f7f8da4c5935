import re
from typing import List

from flashdeck.core.exceptions import CardImportError
from flashdeck.models.cards import Card

LINE_SEPARATORS = re.compile(r"[\n;]+")
FIELD_SEPARATORS = re.compile(r"[\t,]")

EMPTY_IMPORT_MESSAGE = "Merci de saisir du contenu (une carte par ligne)."
NO_VALID_LINE_MESSAGE = (
    "Aucune carte valide : utilisez une ligne par carte, "
    "terme et définition séparés par une tabulation ou une virgule."
)


def parse_line(line: str) -> Card | None:
    """
    'terme<TAB ou ,>définition[,...]' -> Card.
    Les colonnes au-delà de la 2e sont ignorées ; None si terme ou définition vide.
    """
    parts = [p.strip() for p in FIELD_SEPARATORS.split(line)]
    if len(parts) < 2:
        return None
    term, definition = parts[0], parts[1]
    if not term or not definition:
        return None
    return Card(term=term, definition=definition)


def parse_cards(text: str) -> List[Card]:
    """
    Découpe le texte en lignes (retour ligne ou ';'), ignore les lignes vides,
    et garde uniquement les lignes qui donnent une carte. Ne lève jamais.
    """
    cards: List[Card] = []
    for line in LINE_SEPARATORS.split(text or ""):
        if not line.strip():
            continue
        card = parse_line(line)
        if card is not None:
            cards.append(card)
    return cards


def parse_import(text: str) -> List[Card]:
    """
    Variante stricte utilisée par l'import : lève CardImportError si
    le texte est vide ou ne contient aucune ligne exploitable.
    """
    if not (text or "").strip():
        raise CardImportError(EMPTY_IMPORT_MESSAGE)
    cards = parse_cards(text)
    if not cards:
        raise CardImportError(NO_VALID_LINE_MESSAGE)
    return cards
