"""Shared Jinja2 environment and form helpers for the admin pages."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import FormData

from gym_admin.core.settings import settings
from gym_admin.schemas import MAX_ID

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_title"] = settings.app_title


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)


def render_error(request: Request, status_code: int, message: str) -> HTMLResponse:
    return render(
        request,
        "error.html",
        {"title": "Error", "status_code": status_code, "message": message},
        status_code=status_code,
    )


def form_text(form: FormData, name: str) -> str:
    value = form.get(name)
    return value if isinstance(value, str) else ""


def _parse_id(raw: str) -> Optional[int]:
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if 1 <= value <= MAX_ID else None


def form_optional_int(
    form: FormData, name: str, errors: Dict[str, str], error_key: Optional[str] = None
) -> Optional[int]:
    """Read an optional id field. Blank means None."""
    raw = form_text(form, name).strip()
    if not raw:
        return None
    value = _parse_id(raw)
    if value is None:
        errors[error_key or name] = "Choose a valid option."
    return value


def form_int_list(
    form: FormData, name: str, errors: Dict[str, str], error_key: Optional[str] = None
) -> List[int]:
    """Read a repeated id field such as a group of checkboxes."""
    raw_values = [v for v in form.getlist(name) if isinstance(v, str) and v.strip()]
    ids: List[int] = []
    for raw in raw_values:
        value = _parse_id(raw)
        if value is None:
            errors[error_key or name] = "Choose valid options."
        else:
            ids.append(value)
    return ids
