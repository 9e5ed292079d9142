# needahand/services/classifier.py

from ..models.category import CategoryId
from .catalog import CATEGORY_DEFS, FALLBACK_CATEGORY

# Keyword-overlap scoring from a problem description to a service category
class ServiceClassifier:
    categories = CATEGORY_DEFS

    @classmethod
    def score(cls, description: str) -> dict:
        desc_lower = description.lower()
        return {
            category.id: sum(1 for keyword in category.keywords if keyword in desc_lower)
            for category in cls.categories
        }

    @classmethod
    def classify(cls, description: str) -> CategoryId:
        best_id, best_score = FALLBACK_CATEGORY, 0
        for category_id, score in cls.score(description).items():
            # strict '>' so the earlier category keeps a tie
            if score > best_score:
                best_id, best_score = category_id, score
        return best_id if best_score > 0 else FALLBACK_CATEGORY


def classify(description: str) -> CategoryId:
    return ServiceClassifier.classify(description)
