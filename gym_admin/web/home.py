"""Dashboard page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from gym_admin.api.dependencies import DbSession
from gym_admin.services import gym_class_service, member_service, trainer_service
from gym_admin.web.templating import render

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
@router.get("/Home", response_class=HTMLResponse)
async def dashboard(request: Request, db: DbSession):
    """Dashboard with basic counts."""
    context = {
        "title": "Dashboard",
        "stats": {
            "trainers": await trainer_service.count_trainers(db),
            "members": await member_service.count_members(db),
            "classes": await gym_class_service.count_classes(db),
            "enrollments": await member_service.count_enrollments(db),
        },
    }
    return render(request, "home/index.html", context)
