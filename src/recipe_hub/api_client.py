from typing import List, Optional
from urllib.parse import quote

import requests

from src.recipe_hub.config import MEALDB_BASE_URL, REQUEST_TIMEOUT
from src.recipe_hub.logger import get_logger
from src.recipe_hub.models import MealDetail, MealSummary

logger = get_logger(__name__)

# failures that are reported to callers the same way as an empty result
_FETCH_ERRORS = (
    requests.RequestException,
    ValueError,
    KeyError,
    TypeError,
    IndexError,
    AttributeError,
)


class MealDBClient:
    BASE_URL = MEALDB_BASE_URL

    def _get_meals(self, url: str) -> Optional[list]:
        """GET url and return its `meals` array, or None for null/failure"""
        try:
            response = requests.get(url, timeout=REQUEST_TIMEOUT)
            if response.status_code != 200:
                logger.warning("GET %s returned HTTP %s", url, response.status_code)
                return None
            return response.json()["meals"]
        except _FETCH_ERRORS as e:
            logger.warning("GET %s failed: %s", url, e)
            return None

    def search_by_ingredient(self, term: str) -> List[MealSummary]:
        url = f"{self.BASE_URL}filter.php?i={quote(term, safe='')}"
        meals = self._get_meals(url)
        if not meals:
            return []
        try:
            return [MealSummary.from_json(m) for m in meals]
        except _FETCH_ERRORS as e:
            logger.warning("Unexpected search payload for %r: %s", term, e)
            return []

    def lookup_by_id(self, meal_id: str) -> Optional[MealDetail]:
        """Get full details for a meal, None when unknown or unreachable"""
        url = f"{self.BASE_URL}lookup.php?i={quote(str(meal_id), safe='')}"
        meals = self._get_meals(url)
        if not meals:
            return None
        try:
            return MealDetail.from_json(meals[0])
        except _FETCH_ERRORS as e:
            logger.warning("Unexpected lookup payload for %s: %s", meal_id, e)
            return None
