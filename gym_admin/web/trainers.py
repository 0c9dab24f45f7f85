"""Trainer pages."""

from typing import Dict, Optional

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from gym_admin.api.dependencies import DbSession, PathId
from gym_admin.core.errors import ValidationError
from gym_admin.schemas import TrainerCreate, TrainerUpdate
from gym_admin.services import trainer_service
from gym_admin.web.templating import form_text, render

router = APIRouter(prefix="/Trainer", tags=["pages"], include_in_schema=False)

LIST_URL = "/Trainer"


def _form_page(
    request: Request,
    action: str,
    values: Dict[str, str],
    errors: Optional[Dict[str, str]] = None,
    trainer_id: Optional[int] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    context = {
        "title": "New trainer" if trainer_id is None else "Edit trainer",
        "action": action,
        "trainer_id": trainer_id,
        "values": values,
        "errors": errors or {},
    }
    return render(request, "trainer/form.html", context, status_code=status_code)


async def _read_form(request: Request) -> TrainerCreate:
    form = await request.form()
    return TrainerCreate(
        name=form_text(form, "name"),
        email=form_text(form, "email"),
        phone=form_text(form, "phone"),
    )


@router.get("", response_class=HTMLResponse)
@router.get("/Index", response_class=HTMLResponse)
async def trainer_index(
    request: Request,
    db: DbSession,
    search: Optional[str] = Query(default=None, alias="searchString"),
):
    """Trainers list with optional name search."""
    trainers = await trainer_service.list_trainers(db, search)
    context = {"title": "Trainers", "trainers": trainers, "search": search or ""}
    return render(request, "trainer/index.html", context)


@router.get("/Details/{trainer_id}", response_class=HTMLResponse)
async def trainer_details(request: Request, trainer_id: PathId, db: DbSession):
    detail = await trainer_service.get_trainer(db, trainer_id)
    context = {"title": detail.trainer.name, "detail": detail}
    return render(request, "trainer/details.html", context)


@router.get("/Create", response_class=HTMLResponse)
async def trainer_create_form(request: Request):
    return _form_page(request, "/Trainer/Create", {"name": "", "email": "", "phone": ""})


@router.post("/Create", response_class=HTMLResponse)
async def trainer_create(request: Request, db: DbSession):
    data = await _read_form(request)
    try:
        await trainer_service.create_trainer(db, data)
    except ValidationError as e:
        return _form_page(
            request,
            "/Trainer/Create",
            data.model_dump(),
            errors=e.errors,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Edit/{trainer_id}", response_class=HTMLResponse)
async def trainer_edit_form(request: Request, trainer_id: PathId, db: DbSession):
    detail = await trainer_service.get_trainer(db, trainer_id)
    values = detail.trainer.model_dump(exclude={"id"})
    return _form_page(request, f"/Trainer/Edit/{trainer_id}", values, trainer_id=trainer_id)


@router.post("/Edit/{trainer_id}", response_class=HTMLResponse)
async def trainer_edit(request: Request, trainer_id: PathId, db: DbSession):
    data = TrainerUpdate(**(await _read_form(request)).model_dump())
    try:
        await trainer_service.update_trainer(db, trainer_id, data)
    except ValidationError as e:
        return _form_page(
            request,
            f"/Trainer/Edit/{trainer_id}",
            data.model_dump(),
            errors=e.errors,
            trainer_id=trainer_id,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Delete/{trainer_id}", response_class=HTMLResponse)
async def trainer_delete_confirm(request: Request, trainer_id: PathId, db: DbSession):
    detail = await trainer_service.get_trainer(db, trainer_id)
    context = {"title": f"Delete {detail.trainer.name}", "detail": detail}
    return render(request, "trainer/delete.html", context)


@router.post("/Delete/{trainer_id}")
async def trainer_delete(trainer_id: PathId, db: DbSession):
    await trainer_service.delete_trainer(db, trainer_id)
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)
