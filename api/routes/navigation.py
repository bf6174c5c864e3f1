import json
import logging

from fastapi import APIRouter, Request

import config
from api.rendering import templates
from api.routes.pages import nav_context
from data.navigation import NavState

router = APIRouter()
logger = logging.getLogger("marcella.nav")


@router.get("/menu")
def toggle_menu(request: Request, menu_open: bool = False, scroll_y: float = 0):
    nav = NavState.from_request(scroll_y=scroll_y, menu_open=menu_open)
    nav.toggle_menu()
    return templates.TemplateResponse(request, "partials/nav.html", nav_context(nav))


@router.get("/goto/{section_id}")
def goto_section(request: Request, section_id: str, scroll_y: float = 0):
    nav = NavState.from_request(scroll_y=scroll_y)
    target = nav.navigate(section_id)
    response = templates.TemplateResponse(request, "partials/nav.html", nav_context(nav))
    if target is None:
        logger.debug("No section named %s, skipping scroll", section_id)
        return response
    response.headers["HX-Trigger"] = json.dumps(
        {"site:scroll-to": {"section": target, "offset": config.HEADER_OFFSET_PX}}
    )
    return response
