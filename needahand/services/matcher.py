# needahand/services/matcher.py
import re
from typing import Dict, List, Sequence, Set, Union

from ..models.category import CategoryId
from ..models.worker import WorkerProfile
from .catalog import lookup

TOP_N = 3

SKILL_WEIGHT = 3
SPECIALTY_BOOST = 2
RATING_WEIGHT = 1.2
AVAILABILITY_BONUS = 2

_WORD_SPLIT = re.compile(r"\W+")


def build_keyword_set(
    category: Union[str, CategoryId],
    answers: Dict[str, Union[str, bool]]
) -> Set[str]:
    """
    Category keywords plus every word of the free-text and select answers.
    Yes/no answers carry no words.
    """
    keywords = set(lookup(category).keywords)
    for value in answers.values():
        if isinstance(value, str):
            keywords.update(word for word in _WORD_SPLIT.split(value.lower()) if word)
    return keywords


def score_worker(
    worker: WorkerProfile,
    category: Union[str, CategoryId],
    keywords: Set[str]
) -> float:
    skill_match = sum(1 for skill in worker.skills if skill.lower() in keywords)
    specialty_boost = SPECIALTY_BOOST if worker.specialty == CategoryId(category).value else 0
    rating_score = worker.rating
    availability_bonus = AVAILABILITY_BONUS if worker.available else 0
    return (
        skill_match * SKILL_WEIGHT
        + specialty_boost
        + rating_score * RATING_WEIGHT
        + availability_bonus
    )


def rank(
    candidates: Sequence[WorkerProfile],
    category: Union[str, CategoryId],
    answers: Dict[str, Union[str, bool]],
    limit: int = TOP_N
) -> List[WorkerProfile]:
    """Top `limit` candidates by descending score; equal scores keep input order."""
    keywords = build_keyword_set(category, answers)
    scored = [(score_worker(w, category, keywords), w) for w in candidates]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [w for _, w in scored[:limit]]
