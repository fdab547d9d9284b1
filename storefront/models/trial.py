"""Home trial models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class TrialPhase(str, Enum):
    """Where the buyer is in the home-trial flow"""
    EMPTY = "empty"
    SELECTING = "selecting"
    READY = "ready"
    COMPLETED = "completed"


class HomeTrialItem(BaseModel):
    """Product and size selected for try-before-buy delivery"""
    product_id: str
    name: str
    brand: str
    image_url: Optional[str] = None
    slug: str
    price: int = Field(default=0, ge=0)
    size: str


class AddToTrialRequest(BaseModel):
    """Request to add an item to the home-trial bag"""
    slug: str
    size: str = Field(min_length=1)


class TrialResponse(BaseModel):
    """Home-trial API response"""
    items: list[HomeTrialItem]
    item_count: int
    is_valid_trial: bool
    phase: TrialPhase
    selection_message: Optional[str] = None
    added: Optional[bool] = None
    message: Optional[str] = None
