"""
Rendu pur : (CardStore, SessionState, ViewState) -> view models.

Chaque renderer reconstruit entièrement sa région (aucun état caché entre deux
appels) : mêmes entrées, même sortie.
"""
from typing import Callable, Dict, List

from flashdeck.models.cards import CardStore
from flashdeck.models.session import LayoutVariant, SessionState, ViewState
from flashdeck.models.views import (
    Action,
    ActionType,
    CardView,
    JourneyItem,
    JourneyView,
    PanelItem,
    PanelView,
    ScreenView,
    SidebarEntry,
    SidebarView,
    TableRow,
    TableView,
    VariantOption,
)


def _goto(index: int) -> Action:
    return Action(type=ActionType.goTo, index=index)


def _star(index: int) -> Action:
    return Action(type=ActionType.toggleStar, index=index)


def matches_query(term: str, definition: str, query: str) -> bool:
    q = (query or "").lower().strip()
    if not q:
        return True
    return q in term.lower() or q in definition.lower()


# =========================================================
# Surfaces partagées
# =========================================================
def render_card(store: CardStore, state: SessionState) -> CardView:
    card = store[state.current_index]
    return CardView(
        term=card.term,
        definition=card.definition,
        face="back" if state.is_flipped else "front",
        starred=state.current_index in state.starred,
        position=state.current_index + 1,
        total=len(store),
        transitionSeq=state.transition_seq,
    )


def render_variant_selector(state: SessionState) -> List[VariantOption]:
    return [VariantOption(variant=v, active=(v == state.layout)) for v in LayoutVariant]


# =========================================================
# Renderers par variante
# =========================================================
def render_sidebar(store: CardStore, state: SessionState, view: ViewState) -> SidebarView:
    entries = [
        SidebarEntry(
            index=i,
            term=c.term,
            definition=c.definition,
            active=(i == state.current_index),
            select=_goto(i),
        )
        for i, c in enumerate(store)
        if matches_query(c.term, c.definition, view.search_query)
    ]
    return SidebarView(count=len(store), query=view.search_query, entries=entries)


def render_panel(store: CardStore, state: SessionState, title: str) -> PanelView:
    items = [
        PanelItem(
            index=i,
            term=c.term,
            definition=c.definition,
            active=(i == state.current_index),
            starred=(i in state.starred),
            select=_goto(i),
            star=_star(i),
        )
        for i, c in enumerate(store)
    ]
    return PanelView(title=title, items=items)


def render_journey(store: CardStore, state: SessionState) -> JourneyView:
    return JourneyView(
        items=[
            JourneyItem(index=i, label=c.term, active=(i == state.current_index), select=_goto(i))
            for i, c in enumerate(store)
        ]
    )


def render_table(store: CardStore, state: SessionState, view: ViewState) -> TableView:
    rows = [
        TableRow(
            index=i,
            term=c.term,
            definition=c.definition,
            active=(i == state.current_index),
            starred=(i in state.starred),
            selected=(i in view.table_selection),
            select=_goto(i),
            star=_star(i),
            check=Action(type=ActionType.toggleSelect, index=i),
        )
        for i, c in enumerate(store)
    ]
    selected = sum(1 for r in rows if r.selected)
    return TableView(rows=rows, selectedCount=selected)


# Initialiseur de vue spécifique à chaque variante : {champ ScreenView: rendu}
VariantRenderer = Callable[[CardStore, SessionState, ViewState, str], dict]

VARIANT_RENDERERS: Dict[LayoutVariant, VariantRenderer] = {
    LayoutVariant.default: lambda store, state, view, title: {"sidebar": render_sidebar(store, state, view)},
    LayoutVariant.panel: lambda store, state, view, title: {"panel": render_panel(store, state, title)},
    LayoutVariant.panel_alt: lambda store, state, view, title: {"panel": render_panel(store, state, title)},
    LayoutVariant.journey: lambda store, state, view, title: {"journey": render_journey(store, state)},
    LayoutVariant.table: lambda store, state, view, title: {"table": render_table(store, state, view)},
}


def render_screen(store: CardStore, state: SessionState, view: ViewState, title: str) -> ScreenView:
    regions = VARIANT_RENDERERS[state.layout](store, state, view, title)
    return ScreenView(
        title=title,
        layout=state.layout,
        variants=render_variant_selector(state),
        card=render_card(store, state),
        **regions,
    )
