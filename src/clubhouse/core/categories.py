"""Task categories and their display/database lookups."""

from enum import Enum


class TaskCategory(Enum):
    """Clubhouse task categories."""

    SANITATION = "sanitation"
    LAUNDRY = "laundry"
    FOOD = "food"
    COMMUNICATION = "communication"
    MAINTENANCE = "maintenance"
    ADMINISTRATION = "administration"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self]


CATEGORY_LABELS: dict[TaskCategory, str] = {
    TaskCategory.SANITATION: "Sanitation & Facilities",
    TaskCategory.LAUNDRY: "Laundry & Uniforms",
    TaskCategory.FOOD: "Food & Nutrition",
    TaskCategory.COMMUNICATION: "Communication & Coordination",
    TaskCategory.MAINTENANCE: "Maintenance & Supplies",
    TaskCategory.ADMINISTRATION: "Administration & Compliance",
}

CATEGORY_COLORS: dict[TaskCategory, str] = {
    TaskCategory.SANITATION: "blue",
    TaskCategory.LAUNDRY: "purple",
    TaskCategory.FOOD: "orange",
    TaskCategory.COMMUNICATION: "green",
    TaskCategory.MAINTENANCE: "amber",
    TaskCategory.ADMINISTRATION: "slate",
}

# Database enum values, in both the spaced and underscored spellings
_DB_TO_CATEGORY: dict[str, TaskCategory] = {
    "medical & safety": TaskCategory.SANITATION,
    "medical_safety": TaskCategory.SANITATION,
    "equipment & field support": TaskCategory.MAINTENANCE,
    "equipment_field_support": TaskCategory.MAINTENANCE,
    "laundry & cleaning": TaskCategory.LAUNDRY,
    "laundry_cleaning": TaskCategory.LAUNDRY,
    "hygiene & personal care": TaskCategory.SANITATION,
    "hygiene_personal_care": TaskCategory.SANITATION,
    "meals & nutrition": TaskCategory.FOOD,
    "meals_nutrition": TaskCategory.FOOD,
    "misc": TaskCategory.ADMINISTRATION,
    "miscellaneous": TaskCategory.ADMINISTRATION,
}


def category_from_db(value: str | None) -> TaskCategory:
    """Map a database category to a TaskCategory (sanitation if unknown)."""
    if not value:
        return TaskCategory.SANITATION
    return _DB_TO_CATEGORY.get(str(value).strip().lower(), TaskCategory.SANITATION)
