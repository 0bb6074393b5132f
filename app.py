import streamlit as st
from streamlit_local_storage import LocalStorage
from src.recipe_hub.api_client import MealDBClient
from src.recipe_hub.favorites import (
    load_favorites,
    is_favorite,
    toggle_favorite,
)
from src.recipe_hub.logger import get_logger
from src.recipe_hub.models import MealSummary

localS = LocalStorage()
logger = get_logger(__name__)

PAGES = ["Search", "Recipe", "Favorites"]


def main():
    st.set_page_config(page_title="RecipeHub", layout="wide")

    if "initialized" not in st.session_state:
        st.session_state.update(
            {
                "initialized": True,
                "page": "Search",
                "results": [],
                "last_query": "",
                "selected_meal_id": None,
            }
        )

    st.sidebar.title("Navigation")
    page = st.sidebar.radio(
        "Go to", PAGES, index=PAGES.index(st.session_state.page)
    )
    st.session_state.page = page

    if page == "Search":
        render_search()
    elif page == "Recipe":
        render_recipe(st.session_state.selected_meal_id)
    elif page == "Favorites":
        render_favorites()


def run_search(query: str) -> list:
    q = query.strip()
    st.session_state.last_query = q
    if not q:
        st.session_state.results = []
        return []

    client = MealDBClient()
    results = client.search_by_ingredient(q)
    logger.info("Search %r returned %d meals", q, len(results))
    st.session_state.results = results
    return results


def render_search():
    st.title("RecipeHub 🍲")

    col1, col2 = st.columns([4, 1])
    with col1:
        query = st.text_input(
            "Search by ingredient",
            placeholder="e.g., chicken, potato, egg",
        )
    with col2:
        clicked = st.button("Search")

    if clicked:
        run_search(query)

    results = st.session_state.results
    if results:
        for meal in results:
            show_meal_card(meal)
    elif st.session_state.last_query:
        st.error(f'No recipes found for "{st.session_state.last_query}"')
    else:
        st.info(
            "Search recipes by ingredient and open a card to see the full recipe."
        )


def open_recipe(meal_id: str):
    st.session_state.selected_meal_id = meal_id
    st.session_state.page = "Recipe"
    st.rerun()


def on_toggle(meal: MealSummary) -> bool:
    now_favorite = toggle_favorite(meal, localS)
    st.toast(
        "Added to favorites" if now_favorite else "Removed from favorites",
        icon="✅",
    )
    return now_favorite


def show_meal_card(meal: MealSummary):
    fav = is_favorite(meal.id, localS)

    st.subheader(meal.title)
    if meal.thumbnail:
        st.image(meal.thumbnail, width=240)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("View recipe", key=f"view_{meal.id}"):
            open_recipe(meal.id)
    with col2:
        if st.button(
            "★ Remove from Favorites" if fav else "❤️ Add to Favorites",
            key=f"fav_{meal.id}_{fav}",
        ):
            on_toggle(meal)


def render_recipe(meal_id):
    if not meal_id:
        st.info("Pick a recipe from the search results or your favorites.")
        return

    client = MealDBClient()
    detail = client.lookup_by_id(meal_id)
    if detail is None:
        st.error("Could not load recipe details.")
        return

    st.title(detail.title)
    if detail.thumbnail:
        st.image(detail.thumbnail)

    st.markdown(f"**Category:** {detail.category or 'N/A'}")
    if detail.area:
        st.markdown(f"**Cuisine:** {detail.area}")

    fav = is_favorite(detail.id, localS)
    if st.button(
        "★ Remove from Favorites" if fav else "❤️ Add to Favorites",
        key=f"detail_fav_{detail.id}_{fav}",
    ):
        on_toggle(detail.to_summary())

    st.subheader("Ingredients")
    for ingredient, measure in detail.ingredients.items():
        measures = f": {measure}" if measure else ""
        st.write(f"- {ingredient}{measures}")

    st.subheader("Instructions")
    st.write(detail.instructions)

    if detail.youtube:
        st.subheader("Video")
        st.link_button("Watch on YouTube", detail.youtube)


def render_favorites():
    st.title("❤️ Favorites")
    favorites = load_favorites(localS)
    if not favorites:
        st.info("No favorites yet. Save recipes from details or list.")
        return

    for meal in favorites:
        col1, col2, col3 = st.columns([1, 4, 1])
        with col1:
            if meal.thumbnail:
                st.image(meal.thumbnail, width=56)
        with col2:
            if st.button(meal.title, key=f"fav_view_{meal.id}"):
                open_recipe(meal.id)
        with col3:
            if st.button("🗑", key=f"fav_remove_{meal.id}"):
                on_toggle(meal)


if __name__ == "__main__":
    main()
