from fastapi import APIRouter, Body, Depends

from langbridge.api.preferences.models import ThemePreference
from langbridge.api.preferences.store import ThemeStore
from langbridge.core.dependencies import get_current_active_user, get_theme_store

router = APIRouter()


# Redis calls are blocking, so these run in the threadpool
@router.get("/theme", response_model=ThemePreference)
def get_theme(
    user_id: str = Depends(get_current_active_user),
    themes: ThemeStore = Depends(get_theme_store),
):
    return ThemePreference(theme=themes.get_theme(user_id))


@router.put("/theme", response_model=ThemePreference)
def set_theme(
    preference: ThemePreference = Body(...),
    user_id: str = Depends(get_current_active_user),
    themes: ThemeStore = Depends(get_theme_store),
):
    return ThemePreference(theme=themes.set_theme(user_id, preference.theme))
