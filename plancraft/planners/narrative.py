"""Prose for picnic plans: title, summary, safety notes and backup plans."""

from __future__ import annotations

from typing import List

from plancraft.core.formatting import format_clock, format_long_date
from plancraft.schemas import Occasion, PicnicInput

_OCCASION_PHRASES = {
    "casual": "relaxed outdoor gathering",
    "birthday": "birthday celebration",
    "romantic": "romantic picnic",
    "family": "family picnic",
    "celebration": "special celebration",
    "corporate": "corporate event",
}

_FOOD_STYLE_SENTENCES = {
    "potluck": "Everyone will bring something delicious to share!",
    "bring-your-own": "We'll prepare our own tasty treats!",
}
_PROVIDED_FOOD_SENTENCE = "Food will be provided for everyone to enjoy!"

_BASE_SAFETY_TIPS = (
    "Bring a first aid kit with basic supplies",
    "Keep food at proper temperatures to prevent spoilage",
    "Bring hand sanitizer and use before eating",
    "Stay hydrated throughout the day",
    "Be aware of your surroundings and any park rules",
)

_BASE_BACKUP_PLANS = (
    "If weather is bad, consider moving to a covered pavilion in the park",
    "Have indoor alternatives ready like a restaurant or someone's home",
    "Bring cards or indoor games in case outdoor activities aren't possible",
    "Consider postponing if severe weather is forecasted",
)


def compose_picnic_title(occasion: Occasion) -> str:
    return f"{occasion.capitalize()} Picnic"


def compose_picnic_summary(picnic: PicnicInput) -> str:
    """One inviting paragraph describing the picnic."""

    guests = picnic.group_size.headcount
    pets = picnic.group_size.pets
    activities = ", ".join(picnic.activities) if picnic.activities else "various activities"
    food = _FOOD_STYLE_SENTENCES.get(picnic.food_style, _PROVIDED_FOOD_SENTENCE)

    sentences = [
        f"Join us for a wonderful {_OCCASION_PHRASES[picnic.occasion]} at {picnic.location} "
        f"on {format_long_date(picnic.date)} starting at {format_clock(picnic.time)}.",
        f"We'll have {guests} {'person' if guests == 1 else 'people'} enjoying "
        f"{picnic.duration} hours of outdoor fun with {activities}.",
        food,
    ]
    if pets > 0:
        sentences.append(f"Our {pets} furry friend{'' if pets == 1 else 's'} will be joining us too!")
    return " ".join(sentences)


def build_safety_tips(picnic: PicnicInput) -> List[str]:
    tips = list(_BASE_SAFETY_TIPS)
    if picnic.group_size.kids > 0:
        tips.append("Keep an eye on children around water or busy areas")
        tips.append("Bring extra snacks and water for kids")
    if picnic.group_size.pets > 0:
        tips.append("Keep pets on leash and clean up after them")
        tips.append("Bring water for pets and check that they don't overheat")
    tips.append("Use insect repellent if bugs are common in the area")
    return tips


def build_backup_plans(picnic: PicnicInput) -> List[str]:
    plans = list(_BASE_BACKUP_PLANS)
    if picnic.occasion in ("birthday", "celebration"):
        plans.append("Have a backup indoor venue reserved if possible")
    return plans


__all__ = [
    "build_backup_plans",
    "build_safety_tips",
    "compose_picnic_summary",
    "compose_picnic_title",
]
