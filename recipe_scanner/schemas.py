from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalize import normalize_all


class Recipe(BaseModel):
    """One entry of the recipe dataset. Never mutated after load."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        ..., min_length=1, json_schema_extra={"example": "Pancake"}
    )
    link: str = Field(
        ..., json_schema_extra={"example": "https://example.com/pancake"}
    )
    ingredients: Tuple[str, ...] = Field(
        ...,
        json_schema_extra={"example": ["egg", "flour", "milk"]},
    )


class RecipeOut(Recipe):
    id: int


class MatchResult(BaseModel):
    name: str
    link: str
    matched_ingredients: List[str] = Field(default_factory=list)
    missing_ingredients: List[str] = Field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matched_ingredients)


class MatchRequest(BaseModel):
    ingredients: List[str] = Field(
        default_factory=list,
        json_schema_extra={"example": ["Egg", " flour "]},
    )

    @field_validator("ingredients")
    @classmethod
    def _normalize(cls, v: List[str]) -> List[str]:
        return normalize_all(v)


class MatchResponse(BaseModel):
    have: List[str]
    results: List[MatchResult]


class RecipePage(BaseModel):
    items: List[RecipeOut]
    total: int
    page: int
    page_size: int
