# needahand/routes/recommendations.py

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import List
from ..models.category import CategoryDefinition, CategoryId
from ..services.catalog import CATEGORY_DEFS, lookup
from ..services.classifier import ServiceClassifier
from ..utils.auth import get_current_user

recommendation_router = APIRouter(prefix="/recommendation", tags=["Recommendation"])

class IssueDescription(BaseModel):
    description: str

class RecommendationOut(BaseModel):
    category: CategoryId
    title: str
    icon: str

@recommendation_router.post("/recommend", response_model=RecommendationOut)
async def recommend_service(
    issue: IssueDescription,
    current_user: dict = Depends(get_current_user)
):
    category_id = ServiceClassifier.classify(issue.description)
    definition = lookup(category_id)
    return {"category": category_id, "title": definition.title, "icon": definition.icon}

@recommendation_router.get("/categories", response_model=List[CategoryDefinition])
async def list_categories():
    return list(CATEGORY_DEFS)
