from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

MAX_INGREDIENT_SLOTS = 20


def _text(raw: dict, key: str) -> str:
    value = raw.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True)
class MealSummary:
    id: str
    title: str
    thumbnail: str

    @classmethod
    def from_json(cls, raw: dict) -> "MealSummary":
        """Build from a TheMealDB list entry (idMeal, strMeal, strMealThumb)"""
        return cls(
            id=_text(raw, "idMeal"),
            title=_text(raw, "strMeal"),
            thumbnail=_text(raw, "strMealThumb"),
        )

    @classmethod
    def from_dict(cls, raw: dict) -> "MealSummary":
        """Build from the persisted {id, title, thumbnail} shape"""
        return cls(
            id=_text(raw, "id"),
            title=_text(raw, "title"),
            thumbnail=_text(raw, "thumbnail"),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "thumbnail": self.thumbnail}


@dataclass(frozen=True)
class MealDetail:
    id: str
    title: str
    category: str
    area: str
    instructions: str
    thumbnail: str
    # ingredient name -> measure, in slot order
    ingredients: Mapping[str, str] = field(default_factory=dict, hash=False)
    youtube: Optional[str] = None

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(
            self, "ingredients", MappingProxyType(dict(self.ingredients))
        )

    @classmethod
    def from_json(cls, raw: dict) -> "MealDetail":
        """Convert a lookup.php record, dropping ingredient slots with no name"""
        ingredients = {}
        for i in range(1, MAX_INGREDIENT_SLOTS + 1):
            ingredient = _text(raw, f"strIngredient{i}").strip()
            measure = _text(raw, f"strMeasure{i}").strip()
            if ingredient:
                ingredients[ingredient] = measure

        return cls(
            id=_text(raw, "idMeal"),
            title=_text(raw, "strMeal"),
            category=_text(raw, "strCategory"),
            area=_text(raw, "strArea"),
            instructions=_text(raw, "strInstructions"),
            thumbnail=_text(raw, "strMealThumb"),
            ingredients=ingredients,
            youtube=_text(raw, "strYoutube").strip() or None,
        )

    def to_summary(self) -> MealSummary:
        return MealSummary(id=self.id, title=self.title, thumbnail=self.thumbnail)
