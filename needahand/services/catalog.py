# needahand/services/catalog.py
from typing import Dict, Tuple, Union

from ..models.category import CategoryId, FaqType, FaqItem, CategoryDefinition

FALLBACK_CATEGORY = CategoryId.GENERAL

# Enumeration order matters: the classifier breaks ties in favour of the earlier entry.
CATEGORY_DEFS: Tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        id=CategoryId.PLUMBER,
        title="Plumber",
        icon="🛠️",
        keywords=("leak", "pipe", "sink", "drain", "toilet", "water heater", "clog", "faucet", "sewer"),
        faqs=(
            FaqItem(id="location", type=FaqType.SELECT, question="Where is the issue located?",
                    options=("Kitchen", "Bathroom", "Basement", "Laundry", "Outdoor")),
            FaqItem(id="severity", type=FaqType.SELECT, question="How severe is the issue?",
                    options=("Minor drip", "Slow drain", "No water", "Flooding")),
            FaqItem(id="shutoff", type=FaqType.BOOLEAN, question="Have you tried shutting off the water?"),
            FaqItem(id="age", type=FaqType.SELECT, question="Approximate age of the fixture?",
                    options=("<1 year", "1-3 years", "3-5 years", "5+ years", "Unknown")),
        ),
    ),
    CategoryDefinition(
        id=CategoryId.ELECTRICIAN,
        title="Electrician",
        icon="💡",
        keywords=("outlet", "breaker", "fuse", "light", "wiring", "short", "power", "spark", "switch"),
        faqs=(
            FaqItem(id="scope", type=FaqType.SELECT, question="Which is affected?",
                    options=("Single outlet", "Room", "Multiple rooms", "Whole home")),
            FaqItem(id="breaker", type=FaqType.BOOLEAN, question="Did the breaker trip?"),
            FaqItem(id="smell", type=FaqType.BOOLEAN, question="Do you notice burning smell?"),
            FaqItem(id="age", type=FaqType.SELECT, question="Age of electrical system?",
                    options=("<5 years", "5-10 years", "10-20 years", "20+ years", "Unknown")),
        ),
    ),
    CategoryDefinition(
        id=CategoryId.PAINTER,
        title="Painter",
        icon="🎨",
        keywords=("paint", "wall", "peel", "crack", "color", "primer", "roller", "brush", "exterior", "interior"),
        faqs=(
            FaqItem(id="area", type=FaqType.SELECT, question="Where do you need painting?",
                    options=("Interior walls", "Ceiling", "Exterior walls", "Trim/Doors", "Fence/Deck")),
            FaqItem(id="size", type=FaqType.SELECT, question="Approximate area size?",
                    options=("<100 sq ft", "100-300 sq ft", "300-600 sq ft", "600+ sq ft")),
            FaqItem(id="finish", type=FaqType.SELECT, question="Preferred finish?",
                    options=("Matte", "Eggshell", "Satin", "Semi-gloss", "Gloss")),
            FaqItem(id="prep", type=FaqType.BOOLEAN, question="Is surface prep (sanding/patching) needed?"),
        ),
    ),
    CategoryDefinition(
        id=CategoryId.DRIVER,
        title="Driver",
        icon="🚗",
        keywords=("ride", "drive", "pickup", "drop off", "transport", "deliver", "airport", "taxi", "car"),
        faqs=(
            FaqItem(id="vehicle", type=FaqType.SELECT, question="Vehicle type needed?",
                    options=("Sedan", "SUV", "Van/Truck", "No preference")),
            FaqItem(id="distance", type=FaqType.SELECT, question="Trip distance?",
                    options=("<5 miles", "5-15 miles", "15-30 miles", "30+ miles")),
            FaqItem(id="time", type=FaqType.SELECT, question="When do you need it?",
                    options=("ASAP", "Today", "This week", "Later date")),
            FaqItem(id="luggage", type=FaqType.BOOLEAN, question="Do you have large luggage/items?"),
        ),
    ),
    CategoryDefinition(
        id=CategoryId.GENERAL,
        title="General Help",
        icon="🧰",
        keywords=("help", "handyman", "task", "assemble", "mount", "fix", "repair", "install", "move"),
        faqs=(
            FaqItem(id="task", type=FaqType.TEXT, question="Briefly describe the task"),
            FaqItem(id="urgency", type=FaqType.SELECT, question="How urgent is it?",
                    options=("ASAP", "Today", "This week", "Flexible")),
            FaqItem(id="tools", type=FaqType.BOOLEAN, question="Do you have necessary tools?"),
        ),
    ),
)

CATEGORY_BY_ID: Dict[CategoryId, CategoryDefinition] = {c.id: c for c in CATEGORY_DEFS}

# Skill tags a new worker profile starts with when none are given
SPECIALTY_SKILLS: Dict[CategoryId, Tuple[str, ...]] = {
    CategoryId.PLUMBER: ("plumbing", "leak repair", "drain cleaning", "water heater"),
    CategoryId.ELECTRICIAN: ("wiring", "breaker repair", "lighting", "outlets"),
    CategoryId.PAINTER: ("painting", "prep", "interior", "exterior", "trim"),
    CategoryId.DRIVER: ("driving", "transport", "delivery", "airport runs"),
    CategoryId.GENERAL: ("assembly", "mounting", "repair", "install"),
}


def coerce_category(value: Union[str, CategoryId, None]) -> CategoryId:
    """Map a free-text specialty onto the closed category set."""
    try:
        return CategoryId(value)
    except ValueError:
        return FALLBACK_CATEGORY


def lookup(category_id: Union[str, CategoryId]) -> CategoryDefinition:
    return CATEGORY_BY_ID[CategoryId(category_id)]
