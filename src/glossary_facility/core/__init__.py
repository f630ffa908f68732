"""Core models, interfaces and exceptions."""
from .exceptions import GlossaryFacilityError
from .models import BuildJob, BuildStatus, DuplicatePolicy, MalformedPolicy, RenderedPage, Term

__all__ = [
    "GlossaryFacilityError",
    "BuildJob", "BuildStatus", "DuplicatePolicy", "MalformedPolicy", "RenderedPage", "Term",
]
