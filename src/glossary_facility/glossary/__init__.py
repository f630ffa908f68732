"""Term store and definition linking."""
from .term_store import TermStore, insert_ordered
from .linker import DefinitionLinker, link

__all__ = ["TermStore", "insert_ordered", "DefinitionLinker", "link"]
