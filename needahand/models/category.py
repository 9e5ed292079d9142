# needahand/models/category.py
from pydantic import BaseModel, ConfigDict
from typing import Tuple
from enum import Enum

class CategoryId(str, Enum):
    PLUMBER = "Plumber"
    ELECTRICIAN = "Electrician"
    PAINTER = "Painter"
    DRIVER = "Driver"
    GENERAL = "General"

class FaqType(str, Enum):
    TEXT = "text"
    BOOLEAN = "boolean"
    SELECT = "select"

class FaqItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: FaqType
    question: str
    options: Tuple[str, ...] = ()

class CategoryDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: CategoryId
    title: str
    icon: str
    keywords: Tuple[str, ...]
    faqs: Tuple[FaqItem, ...]
