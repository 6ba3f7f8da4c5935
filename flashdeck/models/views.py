from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from flashdeck.models.session import LayoutVariant


class ActionType(str, Enum):
    goTo = "goTo"
    toggleStar = "toggleStar"
    toggleSelect = "toggleSelect"


class Action(BaseModel):
    """
    Affordance cliquable d'une vue : un type = une opération.
    Navigation et étoile sont deux actions distinctes, jamais imbriquées.
    """
    type: ActionType
    index: int = Field(..., ge=0)


class CardView(BaseModel):
    term: str
    definition: str
    face: Literal["front", "back"]
    starred: bool
    position: int = Field(..., ge=1, description="Position 1-based dans le deck")
    total: int
    transitionSeq: int = Field(..., description="Change à chaque goTo (animation one-shot)")


class SidebarEntry(BaseModel):
    index: int
    term: str
    definition: str
    active: bool
    select: Action


class SidebarView(BaseModel):
    title: str = "All Terms"
    count: int
    query: str = ""
    entries: List[SidebarEntry]


class PanelItem(BaseModel):
    index: int
    term: str
    definition: str
    active: bool
    starred: bool
    select: Action
    star: Action


class PanelView(BaseModel):
    title: str
    items: List[PanelItem]


class JourneyItem(BaseModel):
    index: int
    label: str
    active: bool
    select: Action


class JourneyView(BaseModel):
    items: List[JourneyItem]


class TableRow(BaseModel):
    index: int
    term: str
    definition: str
    active: bool
    starred: bool
    selected: bool
    select: Action
    star: Action
    check: Action


class TableView(BaseModel):
    rows: List[TableRow]
    selectedCount: int


class VariantOption(BaseModel):
    variant: LayoutVariant
    active: bool


class ScreenView(BaseModel):
    title: str
    layout: LayoutVariant
    variants: List[VariantOption]
    card: CardView
    sidebar: Optional[SidebarView] = None
    panel: Optional[PanelView] = None
    journey: Optional[JourneyView] = None
    table: Optional[TableView] = None
