"""
Adaptateur HTTP de la session d'étude : chaque requête = un évènement
utilisateur, la réponse = l'écran re-rendu.

Les handlers qui mutent la session sont des coroutines : toutes les
mutations s'exécutent sur le thread de la boucle d'évènements.
"""
from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_404_NOT_FOUND

from flashdeck.core.deps import get_definition_service, get_study_session
from flashdeck.models.study import (
    GoToRequest,
    ImportRequest,
    KeyRequest,
    LayoutRequest,
    SearchRequest,
    StarRequest,
    SuggestionResponse,
)
from flashdeck.models.views import Action, ScreenView
from flashdeck.services.chat_service import DefinitionService
from flashdeck.services.study_session import StudySession

router = APIRouter(prefix="/api/study", tags=["study"])


def _not_found(e: IndexError) -> HTTPException:
    return HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e) or "Carte introuvable.")


@router.get("", response_model=ScreenView)
async def get_screen(session: StudySession = Depends(get_study_session)):
    return session.render()


@router.post("/next", response_model=ScreenView)
async def next_card(session: StudySession = Depends(get_study_session)):
    return session.next()


@router.post("/prev", response_model=ScreenView)
async def prev_card(session: StudySession = Depends(get_study_session)):
    return session.prev()


@router.post("/flip", response_model=ScreenView)
async def flip_card(session: StudySession = Depends(get_study_session)):
    return session.flip()


@router.post("/goto", response_model=ScreenView)
async def go_to(body: GoToRequest, session: StudySession = Depends(get_study_session)):
    return session.go_to(body.index)


@router.post("/star", response_model=ScreenView)
async def toggle_star(body: StarRequest, session: StudySession = Depends(get_study_session)):
    try:
        return session.toggle_star(body.index)
    except IndexError as e:
        raise _not_found(e) from e


@router.post("/layout", response_model=ScreenView)
async def set_layout(body: LayoutRequest, session: StudySession = Depends(get_study_session)):
    return session.set_layout_variant(body.variant)


@router.post("/import", response_model=ScreenView)
async def import_cards(body: ImportRequest, session: StudySession = Depends(get_study_session)):
    # CardImportError -> 400 (handler global)
    return session.import_text(body.text, title=body.title)


@router.post("/key", response_model=ScreenView)
async def key_press(body: KeyRequest, session: StudySession = Depends(get_study_session)):
    return session.handle_key(body.key, target=body.target)


@router.post("/search", response_model=ScreenView)
async def search(body: SearchRequest, session: StudySession = Depends(get_study_session)):
    return session.search(body.query)


@router.post("/actions", response_model=ScreenView)
async def dispatch_action(body: Action, session: StudySession = Depends(get_study_session)):
    try:
        return session.dispatch(body)
    except IndexError as e:
        raise _not_found(e) from e


@router.get("/cards/{index}/suggestion", response_model=SuggestionResponse)
async def suggest_definition(
    index: int,
    session: StudySession = Depends(get_study_session),
    service: DefinitionService = Depends(get_definition_service),
):
    if not 0 <= index < len(session.store):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Carte introuvable.")
    term = session.store[index].term
    # appel bloquant hors boucle ; la session n'est ni bloquée ni modifiée
    definition = await run_in_threadpool(service.suggest, term)
    return SuggestionResponse(term=term, definition=definition, available=definition is not None)
