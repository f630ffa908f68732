"""
In-memory term store.

Holds the known term names in two shapes: a lookup set for exact
(case-sensitive) membership tests and an ordered list kept in
case-insensitive alphabetical order as names are added.
"""
import logging
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

from ..core.exceptions import DuplicateTermError, InvalidTermError, UnknownTermError
from ..core.models import (
    DEFAULT_INDEX_FILENAME, DEFAULT_PAGE_SUFFIX, DuplicatePolicy, Term, validate_term_name
)


logger = logging.getLogger(__name__)


def insert_ordered(names: List[str], name: str) -> int:
    """
    Insert ``name`` into the case-insensitively sorted list ``names``.
    
    Names are compared with ``str.lower()``, one character at a time.
    Scans backward from the last entry; the insertion index is the smallest
    index whose entry compares greater than ``name`` ignoring case, or the
    end of the list if there is none. Names equal ignoring case therefore
    keep their insertion order.
    
    Args:
        names: List already in ascending case-insensitive order (mutated)
        name: Name to insert
        
    Returns:
        Index at which ``name`` was inserted
    """
    key = name.lower()
    index = len(names)
    for i in range(len(names) - 1, -1, -1):
        if key < names[i].lower():
            index = i
    
    names.insert(index, name)
    return index


class TermStore:
    """Set and ordered listing of the terms of one glossary."""
    
    def __init__(
        self,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REPLACE,
        page_suffix: str = DEFAULT_PAGE_SUFFIX,
        reserved_pages: Iterable[str] = (DEFAULT_INDEX_FILENAME,)
    ):
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self.page_suffix = page_suffix
        # Page file names owned by other pages, e.g. the index
        self.reserved_pages = frozenset(reserved_pages)
        self._ordered: List[str] = []
        self._definitions: Dict[str, str] = {}
        self._duplicates: List[str] = []
    
    def add(self, name: str, definition: str = "") -> None:
        """
        Add a term.
        
        A repeated name never produces a second entry in the ordered list.
        With ``REPLACE`` the later definition wins; with ``REJECT`` a
        DuplicateTermError is raised and the store is left unchanged.
        
        Raises:
            InvalidTermError: If the name cannot be used as a page name
            DuplicateTermError: On a repeated name under ``REJECT``
        """
        try:
            validate_term_name(name)
        except (TypeError, ValueError) as e:
            raise InvalidTermError(str(e), term=name) from e
        
        if name + self.page_suffix in self.reserved_pages:
            raise InvalidTermError(
                f"Term page {name + self.page_suffix!r} would overwrite a reserved page",
                term=name
            )
        
        if name in self._definitions:
            if self.duplicate_policy == DuplicatePolicy.REJECT:
                raise DuplicateTermError("Duplicate term name", term=name)
            
            logger.warning(f"Duplicate term '{name}': replacing earlier definition")
            self._duplicates.append(name)
            self._definitions[name] = definition
            return
        
        index = insert_ordered(self._ordered, name)
        self._definitions[name] = definition
        logger.debug(f"Added term '{name}' at position {index}")
    
    def add_term(self, term: Term) -> None:
        self.add(term.name, term.definition)
    
    def definition(self, name: str) -> str:
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownTermError("Unknown term", term=name) from None
    
    def terms(self) -> List[Term]:
        """Terms in index order."""
        return [Term(name, self._definitions[name]) for name in self._ordered]
    
    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._ordered)
    
    @property
    def name_set(self) -> FrozenSet[str]:
        return frozenset(self._definitions)
    
    @property
    def duplicates(self) -> List[str]:
        return list(self._duplicates)
    
    def __contains__(self, name: object) -> bool:
        return name in self._definitions
    
    def __len__(self) -> int:
        return len(self._ordered)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)
    
    def __repr__(self) -> str:
        return f"TermStore(terms={len(self)}, policy={self.duplicate_policy.value})"
