"""
Glossary source parser.

The source is a sequence of blocks::

    term name
    definition line
    more definition lines...
    <blank line or end of input>

Definition lines of one block are joined by direct concatenation.
"""
import logging
from typing import Iterable, List, Optional

from ..core.exceptions import MalformedBlockError
from ..core.interfaces import ILineSource
from ..core.models import MalformedPolicy, Term
from ..glossary.term_store import TermStore


logger = logging.getLogger(__name__)


class GlossaryParser:
    """Splits a line source into terms."""
    
    def __init__(self, malformed_policy: MalformedPolicy = MalformedPolicy.STRICT):
        self.malformed_policy = MalformedPolicy(malformed_policy)
    
    def parse(self, source: Iterable[str]) -> List[Term]:
        """
        Parse every block of ``source``.
        
        Blank lines where a term name is expected are skipped.
        
        Args:
            source: Lines without terminators (an ILineSource or any iterable)
            
        Returns:
            Terms in source order
            
        Raises:
            MalformedBlockError: Under ``STRICT``, when a term name has no
                definition lines
        """
        terms: List[Term] = []
        current: Optional[Term] = None
        fragments: List[str] = []
        
        for line_number, line in enumerate(source, start=1):
            if current is None:
                if line == "":
                    continue
                current = Term(name=line, line_number=line_number)
                fragments = []
            elif line == "":
                terms.append(self._finish(current, fragments))
                current = None
            else:
                fragments.append(line)
        
        if current is not None:
            terms.append(self._finish(current, fragments))
        
        logger.info(f"Parsed {len(terms)} terms from {getattr(source, 'name', '<lines>')}")
        return terms
    
    def load(self, source: Iterable[str], store: TermStore) -> List[Term]:
        """Parse ``source`` and add every term to ``store``."""
        terms = self.parse(source)
        for term in terms:
            store.add_term(term)
        return terms
    
    def _finish(self, term: Term, fragments: List[str]) -> Term:
        if not fragments:
            if self.malformed_policy == MalformedPolicy.STRICT:
                raise MalformedBlockError(
                    "Term has no definition lines",
                    term=term.name,
                    line_number=term.line_number
                )
            logger.warning(
                f"Term '{term.name}' (line {term.line_number}) has no definition; "
                f"using an empty one"
            )
        
        term.definition = ''.join(fragments)
        return term


def parse_glossary(
    source: ILineSource,
    store: Optional[TermStore] = None,
    malformed_policy: MalformedPolicy = MalformedPolicy.STRICT
) -> TermStore:
    """Parse ``source`` into a new (or the given) TermStore."""
    store = store if store is not None else TermStore()
    GlossaryParser(malformed_policy).load(source, store)
    return store
