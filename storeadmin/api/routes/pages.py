from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse, RedirectResponse

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/")
def index():
    return RedirectResponse(url="/settings")


@router.get("/login")
def login_page():
    return FileResponse(TEMPLATES_DIR / "login.html")


@router.get("/error")
def error_page():
    return FileResponse(TEMPLATES_DIR / "error.html")


@router.get("/settings")
def settings_page():
    """Account settings: store assignment and store creation"""
    return FileResponse(TEMPLATES_DIR / "settings.html")
