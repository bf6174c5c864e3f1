from typing import Optional

from fastapi import APIRouter, Depends, Request

from api.rendering import templates
from data.catalog import PRODUCTS, PROMISES, QUALITY_PILLARS
from data.diagrams import GRID_CHECKS, GRID_POINTS, ErrorGridState, MetricPreset, StageFrame
from data.navigation import DESKTOP_LINKS, MOBILE_LINKS, NavState
from data.submissions import SubmitStatus
from services.contact_form import ContactFormFlow, get_contact_form

router = APIRouter()


def nav_context(nav: NavState) -> dict:
    return {"nav": nav, "desktop_links": DESKTOP_LINKS, "mobile_links": MOBILE_LINKS}


def contact_context(form_id: str, status: SubmitStatus, values: Optional[dict] = None) -> dict:
    return {"form_id": form_id, "status": status, "values": values or {}}


def page_context(form_id: str, status: SubmitStatus, values: Optional[dict] = None) -> dict:
    context = {
        "products": PRODUCTS,
        "pillars": QUALITY_PILLARS,
        "promises": PROMISES,
        "grid": ErrorGridState(),
        "grid_checks": GRID_CHECKS,
        "grid_points": GRID_POINTS,
        "stage": StageFrame(step=0),
        "metric": MetricPreset(),
    }
    context.update(nav_context(NavState()))
    context.update(contact_context(form_id, status, values))
    return context


@router.get("/")
def index(request: Request, flow: ContactFormFlow = Depends(get_contact_form)):
    form_id = flow.mount()
    return templates.TemplateResponse(request, "index.html", page_context(form_id, flow.status(form_id)))
