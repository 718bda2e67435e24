# ---------- PROMPTS ----------
# The follow-up prompts quote the previous analysis verbatim so the model
# works from the same meal the user saw.

from ..core.settings import settings

def build_analysis_prompt(language: str | None = None) -> str:
    lang = language or settings.response_language
    return (
        "Identify the food in this image and provide an estimated calorie count, "
        "a brief description of the meal, and a breakdown of its macronutrients "
        "(protein, fat, carbohydrates). Also, provide an explanation of the factors "
        f"considered for the estimation. Respond in {lang}."
    )

def build_recipe_prompt(analysis_text: str, language: str | None = None) -> str:
    lang = language or settings.response_language
    return (
        f'Based on the following food analysis: "{analysis_text}", please generate a '
        "detailed recipe for the meal. The recipe should include a list of ingredients "
        f"and step-by-step instructions. Respond in {lang}."
    )

def build_alternative_prompt(analysis_text: str, language: str | None = None) -> str:
    lang = language or settings.response_language
    return (
        f'Based on the following food analysis: "{analysis_text}", please suggest a '
        "healthier alternative meal. Provide a brief description of the alternative and "
        "compare its macronutrient and calorie values to the original meal. "
        f"Respond in {lang}."
    )
