import logging
from typing import Callable, Dict, List, Optional

from flashdeck.models.cards import DEFAULT_CARDS, DEFAULT_TITLE, UNTITLED_TITLE, CardStore
from flashdeck.models.session import LayoutVariant, SessionState, ViewState
from flashdeck.models.views import Action, ActionType, ScreenView
from flashdeck.services.import_parser import parse_import
from flashdeck.services.persistence import PersistenceAdapter
from flashdeck.services.renderer import render_screen

logger = logging.getLogger(__name__)

Listener = Callable[[ScreenView], None]

# Éléments de saisie : les raccourcis clavier y sont ignorés
TEXT_TARGETS = {"INPUT", "TEXTAREA"}


class StudySession:
    """
    Session d'étude : possède le deck (CardStore), l'état de session et l'état
    local des vues. Seul mutateur ; chaque mutation persiste ce qui doit l'être
    puis re-rend l'écran et notifie les abonnés.
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        store: Optional[CardStore] = None,
        state: Optional[SessionState] = None,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self.persistence = persistence
        self.store = store or CardStore(DEFAULT_CARDS)
        self.state = state or SessionState()
        self.view = ViewState()
        self.title = title
        self._listeners: List[Listener] = []

    # ---------- hydratation ----------

    @classmethod
    def load(cls, persistence: PersistenceAdapter, default_layout: str = "default") -> "StudySession":
        """
        Hydrate depuis le stockage. Chaque snapshot absent ou illisible
        retombe sur ses valeurs par défaut, indépendamment des autres.
        """
        layout = (
            persistence.load_layout()
            or LayoutVariant.parse(default_layout)
            or LayoutVariant.default
        )

        content = persistence.load_content()
        if content is not None:
            store, title = CardStore(content.flashcards), content.title
        else:
            store, title = CardStore(DEFAULT_CARDS), DEFAULT_TITLE

        state = SessionState(layout=layout)
        snap = persistence.load_session()
        if snap is not None:
            if 0 <= snap.currentIndex < len(store):
                state.current_index = snap.currentIndex
            state.starred = {i for i in snap.starredCards if i >= 0}

        logger.info(
            "Session chargée: %d cartes, index=%d, layout=%s",
            len(store), state.current_index, layout.value,
        )
        return cls(persistence, store=store, state=state, title=title)

    # ---------- rendu ----------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def render(self) -> ScreenView:
        return render_screen(self.store, self.state, self.view, self.title)

    def _changed(self) -> ScreenView:
        screen = self.render()
        for listener in list(self._listeners):
            listener(screen)
        return screen

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.store):
            raise IndexError(f"Index de carte hors limites: {index}")
        return index

    # ---------- navigation ----------

    def go_to(self, index: int) -> ScreenView:
        self.state.current_index = index % len(self.store)
        self.state.is_flipped = False
        self.state.transition_seq += 1
        self.persistence.save_session(self.state)
        return self._changed()

    def next(self) -> ScreenView:
        return self.go_to(self.state.current_index + 1)

    def prev(self) -> ScreenView:
        return self.go_to(self.state.current_index - 1)

    def flip(self) -> ScreenView:
        # l'état retourné n'est pas persisté
        self.state.is_flipped = not self.state.is_flipped
        return self._changed()

    # ---------- étoiles / sélection ----------

    def toggle_star(self, index: Optional[int] = None) -> ScreenView:
        idx = self.state.current_index if index is None else self._check_index(index)
        if idx in self.state.starred:
            self.state.starred.remove(idx)
        else:
            self.state.starred.add(idx)
        self.persistence.save_session(self.state)
        return self._changed()

    def toggle_select(self, index: int) -> ScreenView:
        idx = self._check_index(index)
        selection = self.view.table_selection
        if idx in selection:
            selection.remove(idx)
        else:
            selection.add(idx)
        return self._changed()

    def search(self, query: str) -> ScreenView:
        self.view.search_query = query or ""
        return self._changed()

    # ---------- layout ----------

    def set_layout_variant(self, variant: str) -> ScreenView:
        parsed = LayoutVariant.parse(variant)
        if parsed is None:
            logger.info("Variante inconnue ignorée: %r", variant)
            return self.render()
        self.state.layout = parsed
        self.persistence.save_layout(parsed)
        return self._changed()

    # ---------- import ----------

    def import_text(self, text: str, title: Optional[str] = None) -> ScreenView:
        """
        Remplace le deck entier. Lève CardImportError sans rien modifier si
        aucune carte valide. Les étoiles ne sont pas remappées.
        """
        cards = parse_import(text)
        title = (title or "").strip() or UNTITLED_TITLE

        self.store.replace(cards)
        self.title = title
        self.state.current_index = 0
        self.state.is_flipped = False
        self.state.transition_seq += 1
        self.view.table_selection.clear()

        self.persistence.save_content(title, cards)
        self.persistence.save_session(self.state)
        logger.info("Import: %d cartes (%s)", len(cards), title)
        return self._changed()

    # ---------- entrées utilisateur ----------

    def handle_key(self, key: str, target: Optional[str] = None) -> ScreenView:
        if (target or "").upper() in TEXT_TARGETS:
            return self.render()
        if key == "ArrowLeft":
            return self.prev()
        if key == "ArrowRight":
            return self.next()
        if key in (" ", "Enter"):
            return self.flip()
        return self.render()

    def dispatch(self, action: Action) -> ScreenView:
        """Route une affordance de vue vers son unique opération."""
        handlers: Dict[ActionType, Callable[[int], ScreenView]] = {
            ActionType.goTo: self.go_to,
            ActionType.toggleStar: self.toggle_star,
            ActionType.toggleSelect: self.toggle_select,
        }
        # une affordance rendue ne porte que des index 0..n-1
        return handlers[action.type](self._check_index(action.index))
