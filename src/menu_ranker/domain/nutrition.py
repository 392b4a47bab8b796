"""Nutrition domain models."""

import math
from dataclasses import dataclass
from enum import StrEnum


class NutrientCode(StrEnum):
    """Nutrient codes published by the recipe endpoints."""

    ENERGY_KCAL = "EnergyKcal"
    ENERGY_KJ = "EnergyKj"
    PROTEIN = "Protein"
    CARBOHYDRATES = "Carbohydrates"
    SUGAR = "Sugar"
    FAT = "Fat"
    FAT_SATURATED = "FatSaturated"
    SALT = "Salt"
    FIBER = "Fiber"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: str) -> "NutrientCode":
        """Map a raw code to a known member, falling back to UNKNOWN."""
        try:
            code = cls(raw)
        except ValueError:
            return cls.UNKNOWN
        return code


@dataclass(frozen=True)
class NutritionalValue:
    """One nutrient amount from a recipe, per 100 g."""

    name: str
    amount: float
    unit: str

    @property
    def code(self) -> NutrientCode:
        return NutrientCode.parse(self.name)


@dataclass(frozen=True)
class NutrientStats:
    """Protein and energy for a recipe used to rank meals."""

    protein_g: float
    kcal: float

    @property
    def ratio(self) -> float:
        """Kcal per gram of protein, or infinity when protein is not positive."""
        if self.protein_g > 0:
            return self.kcal / self.protein_g
        return math.inf

    @property
    def is_rankable(self) -> bool:
        return math.isfinite(self.ratio)


@dataclass(frozen=True)
class RecipeDetail:
    """Full recipe detail for a single meal."""

    recipe_id: int
    name: str
    ingredients: str
    last_modified: str
    nutritional_values: list[NutritionalValue]
    co2_per_100g: float | None
    diets: str | None

    def first_amount(self, code: NutrientCode) -> float | None:
        """Return the first amount published for a code, if any."""
        if code is NutrientCode.UNKNOWN:
            return None
        for value in self.nutritional_values:
            if value.code is code:
                return value.amount
        return None

    def nutrient_stats(self) -> NutrientStats | None:
        """Return stats when both kcal and protein are published."""
        kcal = self.first_amount(NutrientCode.ENERGY_KCAL)
        protein = self.first_amount(NutrientCode.PROTEIN)
        if kcal is None or protein is None:
            return None
        return NutrientStats(protein_g=protein, kcal=kcal)
