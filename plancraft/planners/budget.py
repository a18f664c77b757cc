"""Picnic cost estimate."""

from __future__ import annotations

from typing import Dict, Tuple

from plancraft.core.formatting import format_currency, round_half_up
from plancraft.schemas import BudgetEstimate, BudgetLine, BudgetTier, FoodStyle, GroupSize

# tier -> (food per head, gear, miscellaneous)
_TIER_COSTS: Dict[str, Tuple[int, int, int]] = {
    "low": (8, 15, 10),
    "medium": (15, 30, 20),
    "high": (25, 50, 30),
}

_FOOD_STYLE_FACTORS: Dict[str, float] = {
    "potluck": 0.6,
    "catered": 1.5,
}


def estimate_budget(
    group_size: GroupSize, budget_tier: BudgetTier, food_style: FoodStyle
) -> BudgetEstimate:
    """Estimate what the picnic will cost.

    Only food scales with the number of guests and the food style; gear and
    miscellaneous costs are flat per tier. Every amount is rounded half-up.
    """

    per_head, gear, misc = _TIER_COSTS[budget_tier]
    food = group_size.headcount * per_head * _FOOD_STYLE_FACTORS.get(food_style, 1.0)

    breakdown = [
        BudgetLine(category="Food & Drinks", amount=format_currency(round_half_up(food))),
        BudgetLine(category="Gear & Supplies", amount=format_currency(gear)),
        BudgetLine(category="Miscellaneous", amount=format_currency(misc)),
    ]
    return BudgetEstimate(
        estimated=format_currency(round_half_up(food + gear + misc)),
        breakdown=breakdown,
    )


__all__ = ["estimate_budget"]
