import os

MEALDB_BASE_URL = os.getenv(
    "MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1/"
).rstrip("/") + "/"

# seconds; one attempt per request, no retry
REQUEST_TIMEOUT = float(os.getenv("MEALDB_TIMEOUT", "10"))

FAVORITES_KEY = os.getenv("RECIPE_HUB_FAVORITES_KEY", "recipe_hub_favs")

LOG_LEVEL = os.getenv("RECIPE_HUB_LOG_LEVEL", "INFO").upper()
