from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    systemPrompt: Optional[str] = Field(default=None, description="Prompt système optionnel")

    # un message blanc est refusé (422), pas envoyé vide au backend
    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v):
        return v.strip() if isinstance(v, str) else v


class ChatResponse(BaseModel):
    response: str
    usage: Optional[Dict[str, Any]] = None


class DefinitionRequest(BaseModel):
    term: str = Field(..., min_length=1)

    @field_validator("term", mode="before")
    @classmethod
    def strip_term(cls, v):
        return v.strip() if isinstance(v, str) else v


class DefinitionResponse(BaseModel):
    term: str
    definition: str


class ErrorPayload(BaseModel):
    error: str
    details: str = ""
