"""Glossary Facility - Cross-linked HTML pages from a plain glossary file."""
__version__ = "1.0.0"

from glossary_facility.core.factory import GlossaryFactory
from glossary_facility.core.models import BuildJob, BuildStatus, Term
from glossary_facility.core.pipeline import GlossaryPipeline

__all__ = [
    "GlossaryFactory",
    "GlossaryPipeline",
    "BuildJob",
    "BuildStatus",
    "Term",
]
