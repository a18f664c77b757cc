"""Packing, food and activity suggestions for picnic plans.

Every generator walks a fixed sequence of rules, so identical inputs always
produce identical lists. Item ids come from the item itself (``"frisbee"``,
``"pet-leash"``), never from list position, because the presentation layer
remembers checked items by id.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple, TypeVar

from plancraft.schemas import ActivityDetail, FoodSuggestion, PackingItem, PicnicInput

_Item = TypeVar("_Item", PackingItem, FoodSuggestion, ActivityDetail)


def _unique_by_id(items: Iterable[_Item]) -> List[_Item]:
    seen: set[str] = set()
    unique: List[_Item] = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


def _matches(tag: str, keywords: Sequence[str]) -> bool:
    lowered = tag.lower()
    return any(keyword in lowered for keyword in keywords)


def _has_tag(tags: Sequence[str], wanted: str) -> bool:
    wanted = wanted.lower()
    return any(tag.lower() == wanted for tag in tags)


# ---------------------------------------------------------------------------
# Packing list
# ---------------------------------------------------------------------------

_ACTIVITY_GEAR: Tuple[Tuple[Tuple[str, ...], PackingItem], ...] = (
    (("frisbee",), PackingItem(id="frisbee", name="Frisbee", category="activities", essential=False)),
    (("ball", "football", "soccer"), PackingItem(id="ball", name="Ball", category="activities", essential=False)),
    (("card",), PackingItem(id="cards", name="Playing cards", category="activities", essential=False)),
    (("music",), PackingItem(id="speaker", name="Bluetooth speaker", category="activities", essential=False)),
    (("kite",), PackingItem(id="kite", name="Kite", category="activities", essential=False)),
)

_PET_ITEMS: Tuple[PackingItem, ...] = (
    PackingItem(id="pet-leash", name="Pet leash", category="gear", essential=True),
    PackingItem(id="pet-water", name="Pet water bowl", category="food", essential=True),
    PackingItem(id="pet-waste-bags", name="Pet waste bags", category="gear", essential=True),
    PackingItem(id="pet-treats", name="Pet treats", category="food", essential=False),
)

_KID_ITEMS: Tuple[PackingItem, ...] = (
    PackingItem(id="kids-games", name="Kids games/toys", category="activities", essential=False),
    PackingItem(id="kids-snacks", name="Kid-friendly snacks", category="food", essential=False),
    PackingItem(id="diaper-bag", name="Diaper bag (if needed)", category="comfort", essential=False),
)


def build_packing_list(picnic: PicnicInput) -> List[PackingItem]:
    """Return the checklist of things to bring."""

    guests = picnic.group_size.headcount
    items: List[PackingItem] = [
        PackingItem(id="blanket", name="Picnic blanket", category="gear", essential=True, quantity="1-2 large blankets"),
        PackingItem(id="cooler", name="Cooler with ice", category="gear", essential=True, quantity="1 large cooler"),
        PackingItem(id="water", name="Water bottles", category="food", essential=True, quantity=f"{guests * 2} bottles"),
        PackingItem(id="sunscreen", name="Sunscreen", category="safety", essential=True, quantity="SPF 30+"),
        PackingItem(id="first-aid", name="First aid kit", category="safety", essential=True),
        PackingItem(id="trash-bags", name="Trash bags", category="gear", essential=True, quantity="3-4 bags"),
        PackingItem(id="wet-wipes", name="Wet wipes", category="comfort", essential=True, quantity="2-3 packs"),
    ]

    if picnic.food_style != "catered":
        items.extend(
            [
                PackingItem(id="plates", name="Plates", category="food", essential=True, quantity=f"{guests} plates"),
                PackingItem(id="cups", name="Cups", category="food", essential=True, quantity=f"{guests} cups"),
                PackingItem(id="utensils", name="Utensils", category="food", essential=True, quantity=f"{guests} sets"),
                PackingItem(id="napkins", name="Napkins", category="food", essential=True, quantity="2-3 packs"),
                PackingItem(id="cutting-board", name="Cutting board", category="food", essential=False),
                PackingItem(id="knife", name="Sharp knife", category="food", essential=False),
                PackingItem(id="serving-spoons", name="Serving spoons", category="food", essential=False),
            ]
        )

    for activity in picnic.activities:
        for keywords, item in _ACTIVITY_GEAR:
            if _matches(activity, keywords):
                items.append(item)

    items.extend(
        [
            PackingItem(id="umbrella", name="Umbrella/Pop-up tent", category="comfort", essential=False, notes="For shade or rain"),
            PackingItem(id="chairs", name="Folding chairs", category="comfort", essential=False, quantity=f"{min(guests, 4)} chairs"),
            PackingItem(id="insect-repellent", name="Insect repellent", category="safety", essential=False),
            PackingItem(id="hand-sanitizer", name="Hand sanitizer", category="safety", essential=True),
        ]
    )

    if picnic.transportation != "car":
        items.append(
            PackingItem(id="backpack", name="Backpack", category="gear", essential=True, notes="For easy carrying")
        )

    if picnic.group_size.pets > 0:
        items.extend(_PET_ITEMS)

    if picnic.group_size.kids > 0:
        items.extend(_KID_ITEMS)

    return _unique_by_id(items)


# ---------------------------------------------------------------------------
# Food & drink
# ---------------------------------------------------------------------------


def _mains(picnic: PicnicInput, guests: int) -> List[FoodSuggestion]:
    if picnic.food_style not in ("bring-your-own", "potluck"):
        return []

    vegetarian = _has_tag(picnic.dietary, "Vegetarian")
    vegan = _has_tag(picnic.dietary, "Vegan")
    gluten_free = _has_tag(picnic.dietary, "Gluten-free")

    mains: List[FoodSuggestion] = []
    if not vegan:
        mains.append(
            FoodSuggestion(
                id="sandwiches",
                name="Assorted sandwiches",
                category="main",
                servings=f"{guests} sandwiches",
                prep_time="30 minutes",
                difficulty="easy",
                recipe="Mix of turkey, ham, and veggie sandwiches with various breads",
                tips="Wrap individually in parchment paper",
            )
        )
    if vegetarian or vegan:
        mains.append(
            FoodSuggestion(
                id="veggie-wraps",
                name="Veggie wraps",
                category="main",
                servings=f"{guests} wraps",
                prep_time="20 minutes",
                difficulty="easy",
                recipe="Hummus, vegetables, and greens in tortillas",
                tips="Use colorful vegetables for visual appeal",
            )
        )
    mains.append(
        FoodSuggestion(
            id="pasta-salad",
            name="Pasta salad",
            category="main",
            servings=f"{math.ceil(guests / 4)} pounds pasta",
            prep_time="45 minutes",
            difficulty="medium",
            recipe="Cold pasta with vegetables, dressing, and herbs",
            tips=(
                "Use gluten-free pasta and make ahead for better flavor"
                if gluten_free
                else "Make ahead for better flavor"
            ),
        )
    )
    return mains


def _always_served(guests: int) -> List[FoodSuggestion]:
    return [
        FoodSuggestion(
            id="potato-salad", name="Potato salad", category="side",
            servings=f"{guests} servings", prep_time="1 hour", difficulty="medium",
            recipe="Classic creamy potato salad with eggs and celery", tips="Keep chilled until serving",
        ),
        FoodSuggestion(
            id="coleslaw", name="Coleslaw", category="side",
            servings=f"{guests} servings", prep_time="15 minutes", difficulty="easy",
            recipe="Fresh cabbage slaw with tangy dressing", tips="Drain excess liquid before serving",
        ),
        FoodSuggestion(
            id="fruit-salad", name="Fresh fruit salad", category="side",
            servings=f"{guests} servings", prep_time="20 minutes", difficulty="easy",
            recipe="Seasonal mixed fruits with light dressing", tips="Add citrus juice to prevent browning",
        ),
        FoodSuggestion(
            id="chips-dip", name="Chips and dip", category="snack",
            servings=f"{guests} servings", prep_time="5 minutes", difficulty="easy",
            recipe="Tortilla chips with salsa and guacamole", tips="Keep dips in cooler until serving",
        ),
        FoodSuggestion(
            id="veggie-tray", name="Vegetable tray", category="snack",
            servings=f"{guests} servings", prep_time="15 minutes", difficulty="easy",
            recipe="Fresh cut vegetables with ranch dip", tips="Cut vegetables the night before",
        ),
        FoodSuggestion(
            id="cheese-crackers", name="Cheese and crackers", category="snack",
            servings=f"{guests} servings", prep_time="10 minutes", difficulty="easy",
            recipe="Assorted cheeses with crackers", tips="Keep cheese cold until serving",
        ),
        FoodSuggestion(
            id="brownies", name="Brownies", category="dessert",
            servings=f"{guests} pieces", prep_time="1 hour", difficulty="medium",
            recipe="Fudgy chocolate brownies cut into squares", tips="Transport in the baking pan",
        ),
        FoodSuggestion(
            id="cookies", name="Cookies", category="dessert",
            servings=f"{guests * 2} cookies", prep_time="2 hours", difficulty="medium",
            recipe="Chocolate chip or oatmeal cookies", tips="Store in airtight container",
        ),
        FoodSuggestion(
            id="watermelon", name="Fresh watermelon", category="dessert",
            servings=f"{guests} servings", prep_time="10 minutes", difficulty="easy",
            recipe="Cubed fresh watermelon", tips="Perfect for hot weather",
        ),
    ]


def _drinks(picnic: PicnicInput, guests: int) -> List[FoodSuggestion]:
    drinks: List[FoodSuggestion] = []
    if _has_tag(picnic.drinks, "Lemonade"):
        drinks.append(
            FoodSuggestion(
                id="lemonade", name="Fresh lemonade", category="drink",
                servings=f"{guests} glasses", prep_time="15 minutes", difficulty="easy",
                recipe="Fresh squeezed lemon juice with sugar and water", tips="Bring in insulated pitcher",
            )
        )
    if _has_tag(picnic.drinks, "Iced tea"):
        drinks.append(
            FoodSuggestion(
                id="iced-tea", name="Iced tea", category="drink",
                servings=f"{guests} glasses", prep_time="30 minutes", difficulty="easy",
                recipe="Sweetened black tea served over ice", tips="Brew strong to account for ice dilution",
            )
        )
    drinks.append(
        FoodSuggestion(
            id="water-infused", name="Infused water", category="drink",
            servings=f"{guests} servings", prep_time="10 minutes", difficulty="easy",
            recipe="Water with cucumber, mint, or fruit", tips="Prepare in large dispensers",
        )
    )
    return drinks


def build_food_suggestions(picnic: PicnicInput) -> List[FoodSuggestion]:
    """Return food ideas ordered main, side, snack, dessert, drink."""

    guests = picnic.group_size.headcount
    suggestions = _mains(picnic, guests) + _always_served(guests) + _drinks(picnic, guests)
    return _unique_by_id(suggestions)


# ---------------------------------------------------------------------------
# Activities
# ---------------------------------------------------------------------------

_ACTIVITY_CATALOGUE: Tuple[Tuple[Tuple[str, ...], ActivityDetail], ...] = (
    (
        ("frisbee",),
        ActivityDetail(
            id="frisbee-game", name="Frisbee", category="active", duration="30-45 minutes",
            participants="2-8 people", equipment=["Frisbee"],
            description="Classic outdoor throwing game perfect for all skill levels",
        ),
    ),
    (
        ("card",),
        ActivityDetail(
            id="card-games", name="Card games", category="games", duration="20-60 minutes",
            participants="2-6 people", equipment=["Playing cards"],
            description="Various card games suitable for different group sizes",
        ),
    ),
    (
        ("music",),
        ActivityDetail(
            id="music", name="Music and singing", category="relaxation", duration="30+ minutes",
            participants="All", equipment=["Bluetooth speaker", "Playlist"],
            description="Background music or group singing for atmosphere",
        ),
    ),
    (
        ("nature", "walk"),
        ActivityDetail(
            id="nature-walk", name="Nature walk", category="exploration", duration="30-45 minutes",
            participants="All", equipment=["Comfortable shoes"],
            description="Explore the surrounding area and enjoy nature",
        ),
    ),
    (
        ("ball", "football", "soccer"),
        ActivityDetail(
            id="ball-games", name="Ball games", category="active", duration="45-60 minutes",
            participants="4-10 people", equipment=["Ball"],
            description="Various ball games including catch, soccer, or football",
        ),
    ),
    (
        ("reading",),
        ActivityDetail(
            id="reading", name="Reading time", category="relaxation", duration="30+ minutes",
            participants="Individual", equipment=["Books", "Comfortable seating"],
            description="Quiet time for personal reading and relaxation",
        ),
    ),
    (
        ("photography",),
        ActivityDetail(
            id="photography", name="Photography", category="creative", duration="30+ minutes",
            participants="All", equipment=["Camera or phone"],
            description="Capture memories and beautiful nature scenes",
        ),
    ),
    (
        ("kite",),
        ActivityDetail(
            id="kite-flying", name="Kite flying", category="active", duration="30-45 minutes",
            participants="1-4 people", equipment=["Kite"],
            description="Fun activity if there's enough wind and open space",
        ),
    ),
    (
        ("scavenger",),
        ActivityDetail(
            id="scavenger-hunt", name="Scavenger hunt", category="games", duration="45-60 minutes",
            participants="4+ people", equipment=["List of items", "Bags"],
            description="Search for specific items in nature or around the area",
        ),
    ),
    (
        ("charades",),
        ActivityDetail(
            id="charades", name="Charades", category="games", duration="30-45 minutes",
            participants="4+ people", equipment=["None"],
            description="Classic acting game perfect for groups",
        ),
    ),
)

_DEFAULT_ACTIVITIES: Tuple[ActivityDetail, ...] = (
    ActivityDetail(
        id="relaxation", name="Relaxation time", category="relaxation", duration="60+ minutes",
        participants="All", equipment=["Blanket", "Comfortable setting"],
        description="Enjoy good conversation and peaceful outdoor time",
    ),
    ActivityDetail(
        id="people-watching", name="People watching", category="relaxation", duration="30+ minutes",
        participants="All", equipment=["None"],
        description="Observe and enjoy the activity around you",
    ),
)


def build_activity_details(picnic: PicnicInput) -> List[ActivityDetail]:
    """Describe each requested activity the catalogue recognises.

    Unrecognised requests are skipped. When nothing is recognised the two
    low-key defaults are returned so the list is never empty.
    """

    has_kids = picnic.group_size.kids > 0
    details: List[ActivityDetail] = []
    for requested in picnic.activities:
        for keywords, detail in _ACTIVITY_CATALOGUE:
            if not _matches(requested, keywords):
                continue
            if detail.id == "scavenger-hunt" and has_kids:
                detail = detail.model_copy(update={"age_group": "kids"})
            details.append(detail)

    details = _unique_by_id(details)
    if not details:
        return list(_DEFAULT_ACTIVITIES)
    return details


__all__ = ["build_activity_details", "build_food_suggestions", "build_packing_list"]
