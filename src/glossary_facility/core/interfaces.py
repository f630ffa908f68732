"""
Interfaces for the pluggable collaborators of the glossary pipeline.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, Sequence

from .models import BuildJob, RenderedPage


# ============================================================================
# LINE SOURCE INTERFACE
# ============================================================================

class ILineSource(ABC):
    """A source of text lines with line terminators removed."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable name of the source (file path, '<string>', ...)."""
        pass
    
    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        pass
    
    def close(self) -> None:
        """Release the underlying resource."""
        pass
    
    def __enter__(self) -> 'ILineSource':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# ============================================================================
# PAGE RENDERER INTERFACE
# ============================================================================

class IPageRenderer(ABC):
    """Interface for page renderers."""
    
    @abstractmethod
    def render_index_page(self, ordered_names: Sequence[str]) -> RenderedPage:
        """Render the index page listing every term."""
        pass
    
    @abstractmethod
    def render_term_page(self, name: str, linked_definition: str) -> RenderedPage:
        """Render the page of one term from its already linked definition."""
        pass
    
    def get_renderer_info(self) -> Dict[str, Any]:
        return {'renderer_class': self.__class__.__name__}


# ============================================================================
# PAGE SINK INTERFACE
# ============================================================================

class IPageSink(ABC):
    """Destination for rendered pages."""
    
    @abstractmethod
    def write(self, page: RenderedPage) -> Path:
        """Write one page and return where it went."""
        pass


# ============================================================================
# PROGRESS CALLBACK INTERFACE
# ============================================================================

class IProgressCallback(ABC):
    """Interface for progress callbacks."""
    
    @abstractmethod
    def on_start(self, job: BuildJob) -> None:
        """Called once the glossary has been parsed."""
        pass
    
    @abstractmethod
    def on_page_written(self, job: BuildJob, path: Path) -> None:
        pass
    
    @abstractmethod
    def on_complete(self, job: BuildJob) -> None:
        pass
    
    @abstractmethod
    def on_error(self, job: BuildJob, error: Exception) -> None:
        pass
