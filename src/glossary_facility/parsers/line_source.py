"""
Line sources for glossary input.
"""
import io
from pathlib import Path
from typing import Iterator, List, Optional, TextIO
import logging

from ..core.exceptions import GlossaryReadError
from ..core.interfaces import ILineSource
from ..core.models import DEFAULT_ENCODING


logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    return line.rstrip('\r\n')


class FileLineSource(ILineSource):
    """Reads lines from a text file. The file is opened on construction."""
    
    def __init__(self, file_path: Path, encoding: str = DEFAULT_ENCODING):
        self.file_path = Path(file_path)
        self.encoding = encoding
        self._handle: Optional[TextIO] = None
        
        if not self.file_path.is_file():
            raise GlossaryReadError("Glossary file not found", file_path=str(self.file_path))
        
        try:
            self._handle = open(self.file_path, 'r', encoding=encoding)
        except OSError as e:
            raise GlossaryReadError(
                f"Cannot open glossary file: {e.strerror or e}",
                file_path=str(self.file_path)
            ) from e
        
        logger.debug(f"Opened glossary source: {self.file_path}")
    
    @property
    def name(self) -> str:
        return str(self.file_path)
    
    def __iter__(self) -> Iterator[str]:
        if self._handle is None:
            raise GlossaryReadError("Glossary source is closed", file_path=str(self.file_path))
        
        try:
            for line in self._handle:
                yield _strip_terminator(line)
        except (OSError, UnicodeDecodeError) as e:
            raise GlossaryReadError(
                f"Cannot read glossary file: {e}",
                file_path=str(self.file_path),
                encoding=self.encoding
            ) from e
    
    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug(f"Closed glossary source: {self.file_path}")


class StringLineSource(ILineSource):
    """Serves lines from an in-memory string."""
    
    def __init__(self, text: str, name: str = "<string>"):
        self._lines: List[str] = [_strip_terminator(line) for line in io.StringIO(text)]
        self._name = name
    
    @property
    def name(self) -> str:
        return self._name
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)
