"""
HTML page renderer for the glossary index and term pages.

Definitions arrive already linked; the renderer inserts them verbatim.
"""
import logging
from typing import Any, Dict, List, Sequence

from ..core.interfaces import IPageRenderer
from ..core.models import (
    DEFAULT_INDEX_FILENAME, DEFAULT_PAGE_SUFFIX, DEFAULT_TITLE, RenderedPage
)


logger = logging.getLogger(__name__)


def page_filename(name: str, suffix: str = DEFAULT_PAGE_SUFFIX) -> str:
    """File name of the page for term ``name``."""
    return f"{name}{suffix}"


class HtmlPageRenderer(IPageRenderer):
    """Renders plain HTML pages, one line per element."""
    
    TERM_HEADING_STYLE = "color:red; font-family:boldface"
    
    def __init__(
        self,
        suffix: str = DEFAULT_PAGE_SUFFIX,
        index_filename: str = DEFAULT_INDEX_FILENAME,
        title: str = DEFAULT_TITLE
    ):
        self.suffix = suffix
        self.index_filename = index_filename
        self.title = title
    
    def render_index_page(self, ordered_names: Sequence[str]) -> RenderedPage:
        lines = self._header(self.title)
        lines.append(f" <h2>{self.title}</h2>")
        lines.append(" <hr>")
        lines.append(" <h3>Index</h3>")
        lines.append(" <ul>")
        for name in ordered_names:
            href = page_filename(name, self.suffix)
            lines.append(f'  <li><a href="{href}">{name}</a></li>')
        lines.append(" </ul>")
        lines.extend(self._footer())
        
        logger.debug(f"Rendered index page with {len(ordered_names)} entries")
        return RenderedPage(self.index_filename, self._join(lines))
    
    def render_term_page(self, name: str, linked_definition: str) -> RenderedPage:
        lines = self._header(name)
        lines.append(f' <h2 style="{self.TERM_HEADING_STYLE}"><i>{name}</i></h2>')
        lines.append(f" <blockquote>{linked_definition}</blockquote>")
        lines.append(" <hr>")
        lines.append(f' <p>Return to <a href="{self.index_filename}">index</a></p>')
        lines.extend(self._footer())
        
        return RenderedPage(page_filename(name, self.suffix), self._join(lines))
    
    def get_renderer_info(self) -> Dict[str, Any]:
        info = super().get_renderer_info()
        info.update({'suffix': self.suffix, 'index_filename': self.index_filename})
        return info
    
    @staticmethod
    def _header(title: str) -> List[str]:
        return [
            "<html>",
            "<head>",
            f"<title>{title}</title>",
            "</head>",
            "<body>",
        ]
    
    @staticmethod
    def _footer() -> List[str]:
        return ["</body> </html>"]
    
    @staticmethod
    def _join(lines: List[str]) -> str:
        return '\n'.join(lines) + '\n'
