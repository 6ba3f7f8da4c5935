from fastapi import Request

from flashdeck.core.config import get_settings
from flashdeck.services.chat_service import ChatService, DefinitionService
from flashdeck.services.persistence import PersistenceAdapter
from flashdeck.services.storage import KeyValueStorage
from flashdeck.services.study_session import StudySession


def get_settings_dep():
    return get_settings()


def get_storage() -> KeyValueStorage:
    """
    Fournit le stockage clé/valeur en dépendance (DI).
    """
    settings = get_settings()
    return KeyValueStorage(base_path=settings.STORAGE_PATH)


def get_study_session(request: Request) -> StudySession:
    # une seule session par application, créée au démarrage (create_app)
    return request.app.state.study_session


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


def get_definition_service(request: Request) -> DefinitionService:
    return request.app.state.definition_service


def build_study_session(storage: KeyValueStorage, default_layout: str = "default") -> StudySession:
    return StudySession.load(PersistenceAdapter(storage), default_layout=default_layout)
