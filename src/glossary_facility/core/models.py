"""
Core data models for the glossary facility.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, FrozenSet


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_SEPARATOR_CHARS = " ,.?!()"
DEFAULT_SEPARATORS: FrozenSet[str] = frozenset(DEFAULT_SEPARATOR_CHARS)

DEFAULT_PAGE_SUFFIX = ".html"
DEFAULT_INDEX_FILENAME = "index.html"
DEFAULT_TITLE = "Glossary"
DEFAULT_ENCODING = "utf-8"

# Characters that cannot appear in a term name because it becomes a file name
FORBIDDEN_NAME_CHARS = frozenset('/\\\x00')


# ============================================================================
# ENUMS
# ============================================================================

class DuplicatePolicy(Enum):
    """What the term store does when a name is added twice."""
    REPLACE = "replace"
    REJECT = "reject"


class MalformedPolicy(Enum):
    """What the parser does with a term name that has no definition lines."""
    STRICT = "strict"
    LENIENT = "lenient"


class BuildStatus(Enum):
    PENDING = "pending"
    PARSING = "parsing"
    LINKING = "linking"
    RENDERING = "rendering"
    COMPLETED = "completed"
    FAILED = "failed"


# ============================================================================
# DATA MODELS
# ============================================================================

@dataclass
class Term:
    """A glossary entry: a name and its raw definition text."""
    name: str
    definition: str = ""
    line_number: Optional[int] = None


@dataclass(frozen=True)
class RenderedPage:
    """An HTML document ready to be written under ``filename``."""
    filename: str
    content: str


@dataclass
class BuildJob:
    job_id: str
    glossary_file: Path
    output_dir: Path
    status: BuildStatus = BuildStatus.PENDING
    total_terms: int = 0
    pages_written: int = 0
    links_created: int = 0
    duplicates: List[str] = field(default_factory=list)
    written_files: List[Path] = field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    errors: List[str] = field(default_factory=list)
    
    @property
    def duration(self) -> float:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        elif self.started_at:
            return (datetime.now() - self.started_at).total_seconds()
        return 0.0
    
    @property
    def index_file(self) -> Optional[Path]:
        # The index page is always written last
        if self.status == BuildStatus.COMPLETED and self.written_files:
            return self.written_files[-1]
        return None


# ============================================================================
# VALIDATION
# ============================================================================

def validate_term_name(name: str) -> None:
    """Raise ValueError when ``name`` cannot be used as a term page name."""
    if not isinstance(name, str):
        raise TypeError(f"Expected str, got {type(name)}")
    if not name:
        raise ValueError("Term name cannot be empty")
    bad = FORBIDDEN_NAME_CHARS.intersection(name)
    if bad:
        raise ValueError(f"Term name contains forbidden characters: {sorted(bad)!r}")
    if name in ('.', '..'):
        raise ValueError(f"Term name cannot be '{name}'")
