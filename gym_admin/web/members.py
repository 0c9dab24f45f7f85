"""Member pages."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from gym_admin.api.dependencies import DbSession, PathId
from gym_admin.core.errors import ValidationError
from gym_admin.schemas import MemberCreate, MemberUpdate
from gym_admin.services import gym_class_service, member_service, trainer_service
from gym_admin.web.templating import form_int_list, form_optional_int, form_text, render

router = APIRouter(prefix="/Member", tags=["pages"], include_in_schema=False)

LIST_URL = "/Member"


async def _form_page(
    request: Request,
    db: AsyncSession,
    action: str,
    values: Dict[str, Any],
    errors: Optional[Dict[str, str]] = None,
    member_id: Optional[int] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    """Render the member form with the trainer and class choices."""
    context = {
        "title": "New member" if member_id is None else "Edit member",
        "action": action,
        "member_id": member_id,
        "values": values,
        "errors": errors or {},
        "trainers": await trainer_service.list_trainers(db),
        "classes": await gym_class_service.list_classes(db),
    }
    return render(request, "member/form.html", context, status_code=status_code)


async def _read_form(request: Request, errors: Dict[str, str]) -> MemberCreate:
    form = await request.form()
    return MemberCreate(
        full_name=form_text(form, "full_name"),
        email=form_text(form, "email"),
        phone=form_text(form, "phone"),
        trainer_id=form_optional_int(form, "trainer_id", errors),
        class_ids=form_int_list(form, "selected_classes", errors, error_key="class_ids"),
    )


def _empty_values() -> Dict[str, Any]:
    return {"full_name": "", "email": "", "phone": "", "trainer_id": None, "class_ids": []}


@router.get("", response_class=HTMLResponse)
@router.get("/Index", response_class=HTMLResponse)
async def member_index(
    request: Request,
    db: DbSession,
    search: Optional[str] = Query(default=None, alias="searchString"),
):
    """Members list with trainer and classes, optional name search."""
    members = await member_service.list_members(db, search)
    context = {"title": "Members", "members": members, "search": search or ""}
    return render(request, "member/index.html", context)


@router.get("/Details/{member_id}", response_class=HTMLResponse)
async def member_details(request: Request, member_id: PathId, db: DbSession):
    detail = await member_service.get_member(db, member_id)
    context = {"title": detail.member.full_name, "detail": detail}
    return render(request, "member/details.html", context)


@router.get("/Create", response_class=HTMLResponse)
async def member_create_form(request: Request, db: DbSession):
    return await _form_page(request, db, "/Member/Create", _empty_values())


@router.post("/Create", response_class=HTMLResponse)
async def member_create(request: Request, db: DbSession):
    errors: Dict[str, str] = {}
    data = await _read_form(request, errors)
    try:
        if errors:
            raise ValidationError(errors)
        await member_service.create_member(db, data)
    except ValidationError as e:
        return await _form_page(
            request,
            db,
            "/Member/Create",
            data.model_dump(),
            errors=e.errors,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Edit/{member_id}", response_class=HTMLResponse)
async def member_edit_form(request: Request, member_id: PathId, db: DbSession):
    detail = await member_service.get_member(db, member_id)
    values = detail.member.model_dump(exclude={"id"})
    return await _form_page(
        request, db, f"/Member/Edit/{member_id}", values, member_id=member_id
    )


@router.post("/Edit/{member_id}", response_class=HTMLResponse)
async def member_edit(request: Request, member_id: PathId, db: DbSession):
    errors: Dict[str, str] = {}
    data = MemberUpdate(**(await _read_form(request, errors)).model_dump())
    try:
        if errors:
            # 404 takes precedence over form errors
            await member_service.get_member(db, member_id)
            raise ValidationError(errors)
        await member_service.update_member(db, member_id, data)
    except ValidationError as e:
        return await _form_page(
            request,
            db,
            f"/Member/Edit/{member_id}",
            data.model_dump(),
            errors=e.errors,
            member_id=member_id,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Delete/{member_id}", response_class=HTMLResponse)
async def member_delete_confirm(request: Request, member_id: PathId, db: DbSession):
    detail = await member_service.get_member(db, member_id)
    context = {"title": f"Delete {detail.member.full_name}", "detail": detail}
    return render(request, "member/delete.html", context)


@router.post("/Delete/{member_id}")
async def member_delete(member_id: PathId, db: DbSession):
    await member_service.delete_member(db, member_id)
    return RedirectResponse(url=LIST_URL, status_code=status.HTTP_303_SEE_OTHER)
