"""
Contact Store - Remote contact submissions table
================================================
Insert contact form submissions into the Supabase table.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Optional

from supabase import Client, create_client

import config

logger = logging.getLogger(__name__)


class ContactStoreError(Exception):
    """The remote store rejected the insert or could not be reached."""


@dataclass
class ContactSubmission:
    """One contact form submission, as stored remotely."""
    first_name: str
    last_name: str
    message: str
    company_name: str = ""
    position: str = ""

    def to_record(self) -> dict:
        return asdict(self)


class ContactStore:
    """Writes contact submissions to Supabase."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        table: Optional[str] = None,
    ):
        self.url = url if url is not None else config.SUPABASE_URL
        self.key = key if key is not None else config.SUPABASE_KEY
        self.table = table or config.CONTACTS_TABLE
        self._client: Optional[Client] = None

    def _get_client(self) -> Client:
        if self._client is None:
            if not self.url or not self.key:
                raise ContactStoreError("Supabase credentials are not configured")
            self._client = create_client(self.url, self.key)
        return self._client

    def insert(self, submission: ContactSubmission) -> None:
        client = self._get_client()
        try:
            client.table(self.table).insert(submission.to_record()).execute()
        except Exception as e:
            raise ContactStoreError(str(e)) from e
        logger.info(f"Stored contact submission in '{self.table}'")


contact_store = ContactStore()
