"""
Writes rendered pages into an output directory.
"""
import logging
from pathlib import Path

from ..core.exceptions import OutputError
from ..core.interfaces import IPageSink
from ..core.models import DEFAULT_ENCODING, RenderedPage


logger = logging.getLogger(__name__)


class DirectoryPageSink(IPageSink):
    """
    Page sink backed by a directory.
    
    Each page is written to its own file, opened and closed per write.
    Pages already written stay in place if a later write fails.
    """
    
    def __init__(self, output_dir: Path, create: bool = True, encoding: str = DEFAULT_ENCODING):
        self.output_dir = Path(output_dir)
        self.encoding = encoding
        
        if create:
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputError(
                    f"Cannot create output directory: {e.strerror or e}",
                    output_path=str(self.output_dir)
                ) from e
        
        if not self.output_dir.is_dir():
            raise OutputError("Output directory does not exist", output_path=str(self.output_dir))
    
    def write(self, page: RenderedPage) -> Path:
        path = self.output_dir / page.filename
        
        try:
            with open(path, 'w', encoding=self.encoding) as f:
                f.write(page.content)
        except OSError as e:
            raise OutputError(
                f"Cannot write page: {e.strerror or e}",
                output_path=str(path)
            ) from e
        
        logger.debug(f"Wrote {path}")
        return path
