"""
Pytest configuration and fixtures.
"""
import pytest
import tempfile
import shutil
from pathlib import Path

from glossary_facility.utils.logger import reset_logging


SAMPLE_GLOSSARY = """meaning
something that one wishes to convey, especially by language

term
a word whose definition is in a glossary

definition
a sequence of words that gives meaning to a term

glossary
a list of difficult or specialized words, with their definitions,
usually near the end of a book

Book
a written work; each term
of a glossary may appear in one
"""


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_text():
    """Sample glossary source text."""
    return SAMPLE_GLOSSARY


@pytest.fixture
def glossary_file(temp_dir, sample_text):
    """Sample glossary written to disk."""
    path = temp_dir / "glossary.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Isolate cwd and environment; drop CLI log handlers afterwards."""
    monkeypatch.chdir(tmp_path)
    for name in ("GLOSSARY_SEPARATORS", "GLOSSARY_DUPLICATE_POLICY",
                 "GLOSSARY_MALFORMED_POLICY", "GLOSSARY_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    yield
    reset_logging()
