"""Glossary source parsers."""
from .glossary_parser import GlossaryParser, parse_glossary
from .line_source import FileLineSource, StringLineSource

__all__ = ["GlossaryParser", "parse_glossary", "FileLineSource", "StringLineSource"]
