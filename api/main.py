import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.routes import contact, diagrams, navigation, pages
import config

app = FastAPI(title="Marcella Health Website")
logger = logging.getLogger("marcella.api")

origins = [o.strip() for o in config.CORS_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or uuid4().hex
    request.state.request_id = request_id
    start = time.time()
    response = None
    try:
        response = await call_next(request)
        response.headers["X-Request-Id"] = request_id
        return response
    finally:
        duration_ms = int((time.time() - start) * 1000)
        status_code = getattr(response, "status_code", 500)
        logger.info(
            "request_id=%s method=%s path=%s htmx=%s status=%s duration_ms=%s",
            request_id,
            request.method,
            request.url.path,
            request.headers.get("hx-request") == "true",
            status_code,
            duration_ms,
        )


@app.middleware("http")
async def ensure_utf8(request: Request, call_next):
    response = await call_next(request)
    content_type = response.headers.get("content-type")
    if content_type and content_type.startswith(("application/json", "text/html")) and "charset=" not in content_type:
        response.headers["content-type"] = f"{content_type}; charset=utf-8"
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


app.mount("/static", StaticFiles(directory=str(config.STATIC_DIR)), name="static")
app.include_router(pages.router, tags=["pages"])
app.include_router(navigation.router, prefix="/ui/nav", tags=["navigation"])
app.include_router(diagrams.router, prefix="/diagrams", tags=["diagrams"])
app.include_router(contact.router, prefix="/contact", tags=["contact"])
