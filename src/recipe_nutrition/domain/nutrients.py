"""Catalog of nutrients reported by the nutrition analysis service."""

from enum import StrEnum


class Nutrient(StrEnum):
    """Nutrient kinds, valued by their upstream nutrient code."""

    CALORIES = "ENERC_KCAL"
    FAT = "FAT"
    SATURATED_FAT = "FASAT"
    MONOUNSATURATED_FAT = "FAMS"
    POLYUNSATURATED_FAT = "FAPU"
    CARBOHYDRATE = "CHOCDF"
    NET_CARBOHYDRATE = "CHOCDF.net"
    FIBER = "FIBTG"
    SUGAR = "SUGAR"
    PROTEIN = "PROCNT"
    CHOLESTEROL = "CHOLE"
    SODIUM = "NA"
    CALCIUM = "CA"
    MAGNESIUM = "MG"
    POTASSIUM = "K"
    IRON = "FE"
    ZINC = "ZN"
    PHOSPHORUS = "P"
    VITAMIN_A = "VITA_RAE"
    VITAMIN_C = "VITC"
    THIAMIN = "THIA"
    RIBOFLAVIN = "RIBF"
    NIACIN = "NIA"
    VITAMIN_B6 = "VITB6A"
    FOLATE_TOTAL = "FOLFE"
    FOLATE_FOOD = "FOLFD"
    FOLIC_ACID = "FOLAC"
    VITAMIN_B12 = "VITB12"
    VITAMIN_D = "VITD"
    VITAMIN_E = "TOCPHA"
    VITAMIN_K = "VITK1"
    WATER = "WATER"


_COMMON_NAMES: dict[Nutrient, str] = {
    Nutrient.CALORIES: "Calories",
    Nutrient.FAT: "Fat",
    Nutrient.SATURATED_FAT: "Saturated Fat",
    Nutrient.MONOUNSATURATED_FAT: "Monounsaturated Fat",
    Nutrient.POLYUNSATURATED_FAT: "Polyunsaturated Fat",
    Nutrient.CARBOHYDRATE: "Carbohydrate",
    Nutrient.NET_CARBOHYDRATE: "Net Carbohydrate",
    Nutrient.FIBER: "Fiber",
    Nutrient.SUGAR: "Sugar",
    Nutrient.PROTEIN: "Protein",
    Nutrient.CHOLESTEROL: "Cholesterol",
    Nutrient.SODIUM: "Sodium",
    Nutrient.CALCIUM: "Calcium",
    Nutrient.MAGNESIUM: "Magnesium",
    Nutrient.POTASSIUM: "Potassium",
    Nutrient.IRON: "Iron",
    Nutrient.ZINC: "Zinc",
    Nutrient.PHOSPHORUS: "Phosphorus",
    Nutrient.VITAMIN_A: "Vitamin A",
    Nutrient.VITAMIN_C: "Vitamin C",
    Nutrient.THIAMIN: "Thiamin",
    Nutrient.RIBOFLAVIN: "Riboflavin",
    Nutrient.NIACIN: "Niacin",
    Nutrient.VITAMIN_B6: "Vitamin B6",
    Nutrient.FOLATE_TOTAL: "Folate (Total)",
    Nutrient.FOLATE_FOOD: "Folate (Food)",
    Nutrient.FOLIC_ACID: "Folic Acid",
    Nutrient.VITAMIN_B12: "Vitamin B12",
    Nutrient.VITAMIN_D: "Vitamin D",
    Nutrient.VITAMIN_E: "Vitamin E",
    Nutrient.VITAMIN_K: "Vitamin K",
    Nutrient.WATER: "Water",
}


def get_nutrient_common_name(nutrient: object) -> str:
    """Return the display name of a nutrient, or an empty string if unknown."""
    if not isinstance(nutrient, Nutrient):
        return ""
    return _COMMON_NAMES.get(nutrient, "")
