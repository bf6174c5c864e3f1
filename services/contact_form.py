"""
Contact Form Flow
=================
The submit handshake: guard against a second submit, insert once,
record the outcome.
"""

import logging

import lang
from data.contact_store import ContactStore, ContactStoreError, ContactSubmission, contact_store
from data.submissions import SubmissionTracker, SubmitStatus, submission_tracker

logger = logging.getLogger(__name__)


class DuplicateSubmission(Exception):
    """A submission for this form is already in flight."""


class ContactFormFlow:
    """Sends contact submissions and keeps each form's submit status."""

    def __init__(self, store: ContactStore, tracker: SubmissionTracker):
        self.store = store
        self.tracker = tracker

    def mount(self) -> str:
        return self.tracker.mount()

    def status(self, form_id: str) -> SubmitStatus:
        return self.tracker.get(form_id)

    def submit(self, form_id: str, submission: ContactSubmission) -> SubmitStatus:
        """
        Send one submission. A single attempt, no retry.

        Raises DuplicateSubmission without touching the store when the form
        is still waiting on an earlier submit.
        """
        if not self.tracker.begin(form_id):
            raise DuplicateSubmission(form_id)

        try:
            self.store.insert(submission)
        except ContactStoreError as e:
            logger.error(f"Contact submission failed for form {form_id}: {e}")
            return self.tracker.fail(form_id, lang.get("contact_error"))

        logger.info(f"Contact submission sent for form {form_id}")
        return self.tracker.succeed(form_id)


contact_form = ContactFormFlow(contact_store, submission_tracker)


def get_contact_form() -> ContactFormFlow:
    return contact_form
