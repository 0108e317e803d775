from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from supabase import Client, create_client

from recipebox import config
from recipebox.utils.time import now_iso

Row = Dict[str, Any]
Result = Tuple[Any, Optional[str]]

# Lazily-initialized Supabase client
_client: Optional[Client] = None


def _get_client() -> Client:
    """
    Lazily initialize the Supabase client so that importing this module
    does not explode if the env is missing (e.g. during local tests).
    """
    global _client
    if _client is None:
        if not config.SUPABASE_URL or not config.SUPABASE_ANON_KEY:
            logging.error("SUPABASE_URL / SUPABASE_ANON_KEY are not set; persistence is unavailable.")
            raise RuntimeError("Supabase is not configured")
        _client = create_client(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)
    return _client


def _table(name: str):
    return _get_client().table(name)


def _run(table: str, build) -> Result:
    """
    Execute one query. Returns:
        (rows, None) on success
        (None, error_str) on failure
    """
    try:
        response = build(_table(table)).execute()
        return response.data, None
    except Exception as e:  # noqa: BLE001
        logging.error("[SUPABASE ERROR %s] %s", table, e)
        return None, str(e)


def _first(result: Result) -> Result:
    rows, error = result
    if error:
        return None, error
    return (rows[0] if rows else None), None


# ================================
# PANTRY — ingredients table
# ================================
def list_ingredients(user_id: str) -> Result:
    return _run(
        "ingredients",
        lambda t: t.select("*").eq("user_id", user_id).order("created_at", desc=True),
    )


def add_ingredient(data: Row) -> Result:
    """
    Insert one pantry item. An empty expiry_date is stored as NULL.
    """
    record = dict(data)
    if record.get("expiry_date") == "":
        record["expiry_date"] = None
    return _first(_run("ingredients", lambda t: t.insert(record)))


def update_ingredient(ingredient_id: str, user_id: str, changes: Row) -> Result:
    record = dict(changes)
    if record.get("expiry_date") == "":
        record["expiry_date"] = None
    record["updated_at"] = now_iso()
    return _first(
        _run(
            "ingredients",
            lambda t: t.update(record).eq("id", ingredient_id).eq("user_id", user_id),
        )
    )


def delete_ingredient(ingredient_id: str, user_id: str) -> Result:
    return _run(
        "ingredients",
        lambda t: t.delete().eq("id", ingredient_id).eq("user_id", user_id),
    )


# ================================
# SHOPPING LIST — shopping_lists table
# ================================
SHOPPING_SELECT = "*, favorite_recipes (title, channel_name, thumbnail_url)"

# Items generated from a recipe jump ahead of manually added ones
RECIPE_PRIORITY = 2


def list_shopping_items(user_id: str) -> Result:
    return _run(
        "shopping_lists",
        lambda t: (
            t.select(SHOPPING_SELECT)
            .eq("user_id", user_id)
            .order("priority", desc=True)
            .order("created_at", desc=True)
        ),
    )


def add_shopping_item(data: Row) -> Result:
    record = dict(data)
    record.setdefault("priority", 1)
    record["is_purchased"] = False
    return _first(_run("shopping_lists", lambda t: t.insert(record)))


def generate_shopping_items(
    user_id: str,
    recipe_id: str,
    recipe_title: Optional[str],
    missing_ingredients: List[Row],
) -> Result:
    """
    Bulk-insert the ingredients a recipe needs but the pantry lacks.
    """
    records = [
        {
            "user_id": user_id,
            "recipe_id": recipe_id,
            "ingredient_name": item.get("name"),
            "quantity": item.get("quantity"),
            "unit": item.get("unit"),
            "priority": RECIPE_PRIORITY,
            "notes": f"{recipe_title}のレシピより",
            "is_purchased": False,
        }
        for item in missing_ingredients
    ]
    return _run("shopping_lists", lambda t: t.insert(records))


def update_shopping_item(item_id: str, user_id: str, changes: Row) -> Result:
    record = dict(changes)
    record["updated_at"] = now_iso()
    return _first(
        _run(
            "shopping_lists",
            lambda t: t.update(record).eq("id", item_id).eq("user_id", user_id),
        )
    )


def set_purchased(item_id: str, user_id: str, is_purchased: bool) -> Result:
    return update_shopping_item(item_id, user_id, {"is_purchased": is_purchased})


def delete_shopping_item(item_id: str, user_id: str) -> Result:
    return _run(
        "shopping_lists",
        lambda t: t.delete().eq("id", item_id).eq("user_id", user_id),
    )


# ================================
# FAVORITES — favorite_recipes table
# ================================
def list_favorites(user_id: str) -> Result:
    return _run(
        "favorite_recipes",
        lambda t: t.select("*").eq("user_id", user_id).order("created_at", desc=True),
    )


def find_favorite(user_id: str, video_id: str) -> Result:
    return _first(
        _run(
            "favorite_recipes",
            lambda t: (
                t.select("id")
                .eq("user_id", user_id)
                .eq("youtube_video_id", video_id)
                .limit(1)
            ),
        )
    )


def add_favorite(data: Row) -> Result:
    return _first(_run("favorite_recipes", lambda t: t.insert(dict(data))))


def delete_favorite(user_id: str, video_id: str) -> Result:
    return _run(
        "favorite_recipes",
        lambda t: t.delete().eq("user_id", user_id).eq("youtube_video_id", video_id),
    )
