from typing import Optional

from pydantic import BaseModel, Field


class GoToRequest(BaseModel):
    index: int


class StarRequest(BaseModel):
    index: Optional[int] = Field(default=None, description="Vide = carte courante")


class LayoutRequest(BaseModel):
    # str libre : une variante inconnue est ignorée (no-op), pas rejetée
    variant: str


class ImportRequest(BaseModel):
    title: Optional[str] = Field(default=None, max_length=200)
    text: str = Field(default="", description="Une carte par ligne : terme<TAB ou ,>définition")


class KeyRequest(BaseModel):
    key: str
    target: Optional[str] = Field(default=None, description="Tag de l'élément ciblé (INPUT, TEXTAREA...)")


class SearchRequest(BaseModel):
    query: str = ""


class SuggestionResponse(BaseModel):
    term: str
    definition: Optional[str] = None
    available: bool
