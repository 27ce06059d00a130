"""Submissions store abstraction layer."""

from core.store.interface import SubmissionsStore, get_submissions_store
from core.store.netlify_store import NetlifySubmissionsStore

__all__ = ["NetlifySubmissionsStore", "SubmissionsStore", "get_submissions_store"]
