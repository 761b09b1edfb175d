from typing import Optional
from fastapi import Request, Response


THEMES = ["light", "dark"]


def get_theme_cookie(request: Request) -> Optional[str]:
    """Get the theme selection from the cookie"""
    theme = request.cookies.get("theme")
    if theme and theme in THEMES:
        return theme
    return None


def is_dark_mode(request: Request) -> bool:
    return get_theme_cookie(request) == "dark"


def toggle_theme_cookie(request: Request, response: Response) -> str:
    """Flip the theme cookie between light and dark (30 days) and return the new value"""
    theme = "light" if is_dark_mode(request) else "dark"

    response.set_cookie(
        key="theme",
        value=theme,
        path="/",
        max_age=30 * 24 * 60 * 60,  # 30 days in seconds
        httponly=True,
        samesite="lax",
        secure=False,  # Set to True if serving over HTTPS
    )
    return theme
