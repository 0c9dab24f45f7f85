"""Gym class pages."""

from typing import Dict, Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from gym_admin.api.dependencies import DbSession, PathId
from gym_admin.core.errors import ValidationError
from gym_admin.schemas import GymClassCreate, GymClassUpdate
from gym_admin.services import gym_class_service
from gym_admin.web.templating import form_text, render

router = APIRouter(prefix="/GymClass", tags=["pages"], include_in_schema=False)

LIST_URL = "/GymClass"


def _form_page(
    request: Request,
    action: str,
    values: Dict[str, str],
    errors: Optional[Dict[str, str]] = None,
    class_id: Optional[int] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    context = {
        "title": "New class" if class_id is None else "Edit class",
        "action": action,
        "class_id": class_id,
        "values": values,
        "errors": errors or {},
    }
    return render(request, "gym_class/form.html", context, status_code=status_code)


@router.get("", response_class=HTMLResponse)
@router.get("/Index", response_class=HTMLResponse)
async def gym_class_index(request: Request, db: DbSession):
    """Classes list."""
    classes = await gym_class_service.list_classes(db)
    return render(request, "gym_class/index.html", {"title": "Classes", "classes": classes})


@router.get("/Details/{class_id}", response_class=HTMLResponse)
async def gym_class_details(request: Request, class_id: PathId, db: DbSession):
    detail = await gym_class_service.get_class(db, class_id)
    context = {"title": detail.gym_class.class_name, "detail": detail}
    return render(request, "gym_class/details.html", context)


@router.get("/Create", response_class=HTMLResponse)
async def gym_class_create_form(request: Request):
    return _form_page(request, "/GymClass/Create", {"class_name": ""})


@router.post("/Create", response_class=HTMLResponse)
async def gym_class_create(request: Request, db: DbSession):
    form = await request.form()
    data = GymClassCreate(class_name=form_text(form, "class_name"))
    try:
        await gym_class_service.create_class(db, data)
    except ValidationError as e:
        return _form_page(
            request,
            "/GymClass/Create",
            data.model_dump(),
            errors=e.errors,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Edit/{class_id}", response_class=HTMLResponse)
async def gym_class_edit_form(request: Request, class_id: PathId, db: DbSession):
    detail = await gym_class_service.get_class(db, class_id)
    values = {"class_name": detail.gym_class.class_name}
    return _form_page(request, f"/GymClass/Edit/{class_id}", values, class_id=class_id)


@router.post("/Edit/{class_id}", response_class=HTMLResponse)
async def gym_class_edit(request: Request, class_id: PathId, db: DbSession):
    form = await request.form()
    data = GymClassUpdate(class_name=form_text(form, "class_name"))
    try:
        await gym_class_service.update_class(db, class_id, data)
    except ValidationError as e:
        return _form_page(
            request,
            f"/GymClass/Edit/{class_id}",
            data.model_dump(),
            errors=e.errors,
            class_id=class_id,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Delete/{class_id}", response_class=HTMLResponse)
async def gym_class_delete_confirm(request: Request, class_id: PathId, db: DbSession):
    detail = await gym_class_service.get_class(db, class_id)
    context = {"title": f"Delete {detail.gym_class.class_name}", "detail": detail}
    return render(request, "gym_class/delete.html", context)


@router.post("/Delete/{class_id}")
async def gym_class_delete(class_id: PathId, db: DbSession):
    await gym_class_service.delete_class(db, class_id)
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)
