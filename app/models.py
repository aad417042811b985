from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from app.core.rules import CUISINES, DIET_TYPES, SORT_RELEVANCE
from app.utils.ingredient_parser import parse_excluded_ingredients


def _unique(values: List[str]) -> List[str]:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class NutritionalInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: int = Field(..., ge=0)
    protein: int = Field(..., ge=0)
    carbs: int = Field(..., ge=0)
    fat: int = Field(..., ge=0)


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str = ""
    image: Optional[str] = None
    cuisine: str
    cooking_time: int = Field(..., gt=0, description="Cooking time in minutes")
    diet_types: List[str] = Field(default_factory=list)
    nutrition: NutritionalInfo
    ingredients: List[str]
    steps: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    difficulty: str = ""
    servings: int = 1
    cooking_method: str = ""

    @field_validator("cuisine")
    @classmethod
    def _known_cuisine(cls, value: str) -> str:
        if value not in CUISINES:
            raise ValueError(f"unknown cuisine '{value}'")
        return value

    @field_validator("diet_types")
    @classmethod
    def _known_diet_types(cls, value: List[str]) -> List[str]:
        unknown = [d for d in value if d not in DIET_TYPES]
        if unknown:
            raise ValueError(f"unknown diet types: {', '.join(unknown)}")
        return value


class ScoredRecipe(Recipe):
    match_score: int = Field(..., ge=0, le=100)


class Preference(BaseModel):
    diet_types: List[str] = Field(default_factory=list)
    cuisines: List[str] = Field(default_factory=list)
    cooking_time: int = Field(
        default=60, ge=0, description="Maximum acceptable cooking time in minutes"
    )
    nutrition: List[str] = Field(
        default_factory=list, description="Nutrition goals, e.g. highProtein, lowCalorie"
    )
    excluded_ingredients: List[str] = Field(
        default_factory=list,
        description="Ingredient terms to avoid; a comma-separated string is also accepted"
    )

    @field_validator("diet_types", "cuisines", "nutrition")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return _unique(value)

    @field_validator("excluded_ingredients", mode="before")
    @classmethod
    def _split_excluded(cls, value):
        if value is None or isinstance(value, (str, list, tuple)):
            return parse_excluded_ingredients(value)
        # Let field validation reject anything else.
        return value


class MatchRequest(BaseModel):
    preferences: Preference = Field(default_factory=Preference)
    sort_by: constr(strip_whitespace=True) = Field(
        default=SORT_RELEVANCE, description="relevance, time or calories"
    )


class MatchResponse(BaseModel):
    match_id: str
    generated_at: str
    sort_by: str
    total_matches: int
    recipes: List[ScoredRecipe]


class ReorderRequest(BaseModel):
    recipes: List[ScoredRecipe]
    sort_by: constr(strip_whitespace=True) = SORT_RELEVANCE


class ReorderResponse(BaseModel):
    sort_by: str
    recipes: List[ScoredRecipe]
