"""
Food Helper Functions

Contains utility functions for food-related operations including:
- Scaling per-100g nutrient values to a quantity
- Summing calories and macros over food records
"""

from typing import Dict, Iterable, Mapping

NUTRIENT_KEYS = ("calories", "protein", "carbs", "fat")


def empty_totals() -> Dict[str, float]:
    return {key: 0 for key in NUTRIENT_KEYS}


def scale_per_100g(per_100g: Mapping[str, float], quantity_g: float) -> Dict[str, float]:
    """
    Calculate nutritional values for a given quantity of a food.

    Args:
        per_100g: Mapping with calories, protein, carbs, fat per 100 grams
        quantity_g: Quantity in grams

    Returns:
        Dictionary with calories, protein, carbs, fat
    """
    factor = float(quantity_g) / 100.0
    return {key: float(per_100g.get(key) or 0) * factor for key in NUTRIENT_KEYS}


def sum_nutrients(items: Iterable) -> Dict[str, float]:
    """Fold calories and macros over records exposing those attributes."""
    totals = empty_totals()
    for item in items:
        for key in NUTRIENT_KEYS:
            totals[key] += getattr(item, key) or 0
    return totals
