"""
Services Package
================
Business logic services: the contact form submit flow.
"""

from services.contact_form import ContactFormFlow, DuplicateSubmission, contact_form, get_contact_form

__all__ = [
    "ContactFormFlow",
    "DuplicateSubmission",
    "contact_form",
    "get_contact_form",
]
