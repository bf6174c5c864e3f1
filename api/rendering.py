from datetime import datetime

from fastapi.templating import Jinja2Templates

import config
import lang
from data.catalog import LOGO_URL

templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))
templates.env.globals.update(
    _=lang.get,
    config=config,
    logo_url=LOGO_URL,
    current_year=lambda: datetime.now().year,
)


def is_htmx(request) -> bool:
    return request.headers.get("hx-request") == "true"
