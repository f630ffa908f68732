"""Page renderers and writers."""
from .html_formatter import HtmlPageRenderer, page_filename
from .page_sink import DirectoryPageSink

__all__ = ["HtmlPageRenderer", "page_filename", "DirectoryPageSink"]
