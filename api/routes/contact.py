import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from pydantic import BaseModel, ValidationError, field_validator

import lang
from api.rendering import is_htmx, templates
from api.routes.pages import contact_context, page_context
from api.throttle import check_contact_rate_limit, record_contact_submission
from data.contact_store import ContactSubmission
from data.submissions import SubmitStatus
from services.contact_form import ContactFormFlow, DuplicateSubmission, get_contact_form

router = APIRouter()
logger = logging.getLogger("marcella.contact")


class ContactForm(BaseModel):
    form_id: str
    first_name: str
    last_name: str
    company_name: str = ""
    position: str = ""
    message: str

    @field_validator("first_name", "last_name", "message")
    @classmethod
    def required_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("required")
        return value

    def to_submission(self) -> ContactSubmission:
        return ContactSubmission(
            first_name=self.first_name,
            last_name=self.last_name,
            company_name=self.company_name,
            position=self.position,
            message=self.message,
        )


def render_contact(
    request: Request,
    form_id: str,
    status: SubmitStatus,
    values: Optional[dict] = None,
    status_code: int = 200,
):
    if is_htmx(request):
        # htmx only swaps 2xx responses, so rejections still answer 200 here
        return templates.TemplateResponse(
            request, "partials/contact_panel.html", contact_context(form_id, status, values)
        )
    return templates.TemplateResponse(
        request, "index.html", page_context(form_id, status, values), status_code=status_code
    )


@router.post("")
def submit_contact(
    request: Request,
    form_id: str = Form(...),
    first_name: str = Form(""),
    last_name: str = Form(""),
    company_name: str = Form(""),
    position: str = Form(""),
    message: str = Form(""),
    flow: ContactFormFlow = Depends(get_contact_form),
):
    posted = {
        "first_name": first_name,
        "last_name": last_name,
        "company_name": company_name,
        "position": position,
        "message": message,
    }

    def reject(status_code: int):
        status = flow.status(form_id)
        status.submit_error = lang.get("contact_error")
        return render_contact(request, form_id, status, posted, status_code)

    try:
        check_contact_rate_limit(request)
    except HTTPException as e:
        logger.warning("Rate limited contact form %s", form_id)
        return reject(e.status_code)

    try:
        payload = ContactForm(form_id=form_id, **posted)
    except ValidationError:
        logger.info("Rejected contact form %s: missing required fields", form_id)
        return reject(422)

    submission = payload.to_submission()
    try:
        status = flow.submit(payload.form_id, submission)
    except DuplicateSubmission:
        raise HTTPException(status_code=409, detail="Submission already in progress")

    if status.submit_error:
        # A failed send keeps what the visitor typed so they can retry
        return render_contact(request, payload.form_id, status, submission.to_record())

    record_contact_submission(request)
    return render_contact(request, payload.form_id, status)
