"""Pydantic models for provider menu API payloads."""

from pydantic import BaseModel, Field

from menu_ranker.domain.nutrition import NutritionalValue, RecipeDetail


class RawMeal(BaseModel):
    """Meal entry inside a menu package."""

    name: str
    recipe_id: int = Field(alias="recipeId")
    diets: list[str]
    icon_url: str = Field(alias="iconUrl")


class MenuSection(BaseModel):
    """Menu package (a line or counter) with its meals."""

    sort_order: int = Field(alias="sortOrder")
    name: str
    price: str | None = None
    meals: list[RawMeal]


class RawMenuResponse(BaseModel):
    """Day menu payload for one restaurant."""

    day_of_week: str = Field(alias="dayOfWeek")
    date: str
    menu_packages: list[MenuSection] = Field(alias="menuPackages")
    html: str | None = None
    is_manual_menu: bool = Field(alias="isManualMenu")

    def meals(self) -> list[RawMeal]:
        """Return all meals across packages in document order."""
        return [meal for package in self.menu_packages for meal in package.meals]


class RawNutritionalValue(BaseModel):
    """Nutrient entry in a recipe payload."""

    name: str
    amount: float = Field(allow_inf_nan=False)
    unit: str


class RawRecipeDetail(BaseModel):
    """Recipe detail payload."""

    recipe_id: int = Field(alias="recipeId")
    name: str
    ingredients_cleaned: str = Field(alias="ingredientsCleaned")
    last_modified: str = Field(alias="lastModified")
    nutritional_values: list[RawNutritionalValue] = Field(alias="nutritionalValues")
    kg_co2e_per_100g: float | None = Field(default=None, alias="kgCO2ePer100g")
    diets: str | None = None

    def to_domain(self) -> RecipeDetail:
        """Convert the payload into a domain recipe detail."""
        return RecipeDetail(
            recipe_id=self.recipe_id,
            name=self.name,
            ingredients=self.ingredients_cleaned,
            last_modified=self.last_modified,
            nutritional_values=[
                NutritionalValue(name=value.name, amount=value.amount, unit=value.unit)
                for value in self.nutritional_values
            ],
            co2_per_100g=self.kg_co2e_per_100g,
            diets=self.diets,
        )
