import logging
from typing import Any, Dict, List, Optional

from flashdeck.core.config import Settings
from flashdeck.core.exceptions import UpstreamServiceError
from flashdeck.models.chat import ChatResponse, DefinitionResponse

logger = logging.getLogger(__name__)

DEFINITION_SYSTEM_PROMPT = (
    "You are a helpful assistant that creates concise, clear definitions "
    "for study flashcards. Keep definitions under 50 words."
)


def build_openai_client(settings: Settings):
    """
    Client OpenAI si OPENAI_API_KEY est défini, sinon None (service non configuré).
    """
    if not settings.OPENAI_API_KEY:
        return None
    from openai import OpenAI  # openai>=1.0
    return OpenAI(api_key=settings.OPENAI_API_KEY)


def _usage_dict(usage: Any) -> Optional[Dict[str, Any]]:
    if usage is None:
        return None
    if hasattr(usage, "model_dump"):
        return usage.model_dump()
    return dict(usage)


class _CompletionService:
    error_message = "Failed to get AI response"

    def __init__(self, client=None, model: str = "gpt-3.5-turbo"):
        self.client = client
        self.model = model

    def _complete(self, messages: List[Dict[str, str]], max_tokens: int, temperature: float):
        if self.client is None:
            raise UpstreamServiceError(
                self.error_message,
                "OPENAI_API_KEY non configurée.",
                configured=False,
            )
        try:
            return self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            logger.warning("OpenAI error: %s", e)
            raise UpstreamServiceError(self.error_message, str(e)) from e


class ChatService(_CompletionService):
    """
    Proxy minimal vers l'API de chat : {message, systemPrompt?} -> {response, usage}.
    """

    def __init__(self, client=None, model: str = "gpt-3.5-turbo", max_tokens: int = 500, temperature: float = 0.7):
        super().__init__(client=client, model=model)
        self.max_tokens = max_tokens
        self.temperature = temperature

    def reply(self, message: str, system_prompt: Optional[str] = None) -> ChatResponse:
        conv: List[Dict[str, str]] = []
        if system_prompt:
            conv.append({"role": "system", "content": system_prompt})
        conv.append({"role": "user", "content": message})

        comp = self._complete(conv, self.max_tokens, self.temperature)
        text = comp.choices[0].message.content or ""
        return ChatResponse(response=text.strip(), usage=_usage_dict(getattr(comp, "usage", None)))


class DefinitionService(_CompletionService):
    """
    Génération de définition pour une carte : {term} -> {term, definition}.
    """

    error_message = "Failed to generate definition"

    def __init__(self, client=None, model: str = "gpt-3.5-turbo", max_tokens: int = 100, temperature: float = 0.7):
        super().__init__(client=client, model=model)
        self.max_tokens = max_tokens
        self.temperature = temperature

    def generate(self, term: str) -> DefinitionResponse:
        comp = self._complete(
            [
                {"role": "system", "content": DEFINITION_SYSTEM_PROMPT},
                {"role": "user", "content": f"Define the following term for a flashcard: {term}"},
            ],
            self.max_tokens,
            self.temperature,
        )
        definition = (comp.choices[0].message.content or "").strip()
        if not definition:
            raise UpstreamServiceError(self.error_message, "Réponse vide.")
        return DefinitionResponse(term=term, definition=definition)

    def suggest(self, term: str) -> Optional[str]:
        """
        Comme generate(), mais tout échec = "génération indisponible" (None).
        """
        try:
            return self.generate(term).definition
        except UpstreamServiceError as e:
            logger.info("Définition indisponible pour %r: %s", term, e.details or e.error)
            return None
