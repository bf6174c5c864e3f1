"""
Submission Tracker - Submit status per mounted contact form
===========================================================
Every page render issues a form id; the tracker remembers whether that
form is sending, has failed, or has been sent.
"""

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from typing import Optional
from uuid import uuid4

import config

logger = logging.getLogger(__name__)


@dataclass
class SubmitStatus:
    """Submit state of one contact form."""
    is_submitting: bool = False
    submit_error: Optional[str] = None
    submitted: bool = False
    touched_at: float = field(default_factory=time.time)


class SubmissionTracker:
    """Tracks submit status for all mounted contact forms."""

    def __init__(self, ttl_seconds: Optional[int] = None):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else config.FORM_SESSION_TTL_SECONDS
        self._forms: dict[str, SubmitStatus] = {}
        self._lock = threading.Lock()

    def mount(self) -> str:
        """Register a freshly rendered form and return its id."""
        form_id = uuid4().hex
        with self._lock:
            self._prune()
            self._forms[form_id] = SubmitStatus()
        return form_id

    def get(self, form_id: str) -> SubmitStatus:
        """Snapshot of a form's status; unknown ids read as idle."""
        with self._lock:
            status = self._forms.get(form_id)
            return replace(status) if status else SubmitStatus()

    def begin(self, form_id: str) -> bool:
        """
        Mark a form as submitting.

        Returns False when the form already has a submission in flight.
        """
        with self._lock:
            status = self._forms.setdefault(form_id, SubmitStatus())
            if status.is_submitting:
                logger.info(f"Ignoring duplicate submit for form {form_id}")
                return False
            status.is_submitting = True
            status.submit_error = None
            status.touched_at = time.time()
            return True

    def succeed(self, form_id: str) -> SubmitStatus:
        with self._lock:
            status = self._forms.setdefault(form_id, SubmitStatus())
            status.is_submitting = False
            status.submitted = True
            status.touched_at = time.time()
            return replace(status)

    def fail(self, form_id: str, message: str) -> SubmitStatus:
        with self._lock:
            status = self._forms.setdefault(form_id, SubmitStatus())
            status.is_submitting = False
            status.submit_error = message
            status.touched_at = time.time()
            return replace(status)

    def _prune(self) -> None:
        cutoff = time.time() - self.ttl_seconds
        expired = [
            form_id
            for form_id, status in self._forms.items()
            if status.touched_at < cutoff and not status.is_submitting
        ]
        for form_id in expired:
            del self._forms[form_id]


submission_tracker = SubmissionTracker()
