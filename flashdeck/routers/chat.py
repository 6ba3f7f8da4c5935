from fastapi import APIRouter, Depends

from flashdeck.core.deps import get_chat_service, get_definition_service
from flashdeck.models.chat import ChatRequest, ChatResponse, DefinitionRequest, DefinitionResponse, ErrorPayload
from flashdeck.services.chat_service import ChatService, DefinitionService

router = APIRouter(prefix="/api", tags=["chat"])

_ERRORS = {500: {"model": ErrorPayload}, 503: {"model": ErrorPayload}}


@router.post("/chat", response_model=ChatResponse, responses=_ERRORS)
def chat(body: ChatRequest, service: ChatService = Depends(get_chat_service)):
    return service.reply(message=body.message, system_prompt=body.systemPrompt)


@router.post("/generate-definition", response_model=DefinitionResponse, responses=_ERRORS)
def generate_definition(body: DefinitionRequest, service: DefinitionService = Depends(get_definition_service)):
    return service.generate(body.term)
