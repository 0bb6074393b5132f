import json
from typing import List

from src.recipe_hub.config import FAVORITES_KEY
from src.recipe_hub.logger import get_logger
from src.recipe_hub.models import MealSummary

logger = get_logger(__name__)


def _safe_json_loads(data: str) -> list:
    try:
        return json.loads(data) if data else []
    except (json.JSONDecodeError, TypeError):
        logger.warning("Discarding unreadable value under %r", FAVORITES_KEY)
        return []


def load_favorites(local_storage) -> List[MealSummary]:
    raw = _safe_json_loads(local_storage.getItem(FAVORITES_KEY))
    try:
        return [MealSummary.from_dict(item) for item in raw]
    except (TypeError, AttributeError):
        logger.warning("Discarding malformed favorites under %r", FAVORITES_KEY)
        return []


def save_favorites(favorites: List[MealSummary], local_storage) -> None:
    local_storage.setItem(
        FAVORITES_KEY, json.dumps([meal.to_dict() for meal in favorites])
    )


def is_favorite(meal_id: str, local_storage) -> bool:
    return any(meal.id == meal_id for meal in load_favorites(local_storage))


def toggle_favorite(item: MealSummary, local_storage) -> bool:
    """Add item if its id is not stored yet, remove it otherwise.

    Returns True when the item is a favorite after the toggle.
    """
    favorites = load_favorites(local_storage)
    index = next(
        (i for i, meal in enumerate(favorites) if meal.id == item.id), None
    )
    if index is not None:
        favorites.pop(index)
    else:
        favorites.append(item)
    save_favorites(favorites, local_storage)
    return index is None
