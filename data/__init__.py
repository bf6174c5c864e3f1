"""
Data Package
============
Page state and content: navigation, diagrams, catalog, contact submissions.
"""

from data.navigation import NavState, NavLink, PAGE_SECTIONS
from data.diagrams import ErrorGridState, StageFrame, MetricPreset, format_rate
from data.contact_store import ContactStore, ContactStoreError, ContactSubmission, contact_store
from data.submissions import SubmissionTracker, SubmitStatus, submission_tracker

__all__ = [
    "NavState",
    "NavLink",
    "PAGE_SECTIONS",
    "ErrorGridState",
    "StageFrame",
    "MetricPreset",
    "format_rate",
    "ContactStore",
    "ContactStoreError",
    "ContactSubmission",
    "contact_store",
    "SubmissionTracker",
    "SubmitStatus",
    "submission_tracker",
]
