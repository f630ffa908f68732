"""
Definition linker.

Rewrites definition text so that every token exactly equal to a known term
name becomes an anchor to that term's page.
"""
import logging
from typing import AbstractSet, List

from ..core.models import DEFAULT_PAGE_SUFFIX, DEFAULT_SEPARATORS
from ..utils.tokenizer import tokenize
from .term_store import TermStore


logger = logging.getLogger(__name__)


def anchor(name: str, suffix: str = DEFAULT_PAGE_SUFFIX) -> str:
    """Anchor element pointing at the page of term ``name``."""
    return f'<a href="{name}{suffix}">{name}</a>'


def link(
    text: str,
    separators: AbstractSet[str],
    term_names: AbstractSet[str],
    suffix: str = DEFAULT_PAGE_SUFFIX
) -> str:
    """
    Replace each token of ``text`` that is a term name with an anchor.
    
    Only whole tokens are matched, case-sensitively. Separator tokens and
    other word tokens are copied unchanged.
    
    Args:
        text: Raw definition text
        separators: Separator characters used to tokenize ``text``
        term_names: Known term names
        suffix: Page file suffix appended to the term name in the href
        
    Returns:
        Linked text
    """
    parts = []
    for token in tokenize(text, separators):
        if token in term_names:
            parts.append(anchor(token, suffix))
        else:
            parts.append(token)
    return ''.join(parts)


class DefinitionLinker:
    """Links definitions against the names held by a TermStore."""
    
    def __init__(
        self,
        store: TermStore,
        separators: AbstractSet[str] = DEFAULT_SEPARATORS,
        suffix: str = DEFAULT_PAGE_SUFFIX
    ):
        self.store = store
        self.separators = frozenset(separators)
        self.suffix = suffix
    
    def link(self, text: str) -> str:
        return link(text, self.separators, self.store.name_set, self.suffix)
    
    def link_term(self, name: str) -> str:
        """Linked definition of a stored term."""
        return self.link(self.store.definition(name))
    
    def find_references(self, text: str) -> List[str]:
        """Term names referenced by ``text``, in order of first appearance."""
        names = self.store.name_set
        seen = []
        for token in tokenize(text, self.separators):
            if token in names and token not in seen:
                seen.append(token)
        return seen
    
    def count_links(self, text: str) -> int:
        names = self.store.name_set
        return sum(1 for token in tokenize(text, self.separators) if token in names)
