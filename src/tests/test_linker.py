"""Tests for definition linking."""
import pytest

from glossary_facility.core.models import DEFAULT_SEPARATORS
from glossary_facility.glossary.linker import DefinitionLinker, anchor, link
from glossary_facility.glossary.term_store import TermStore


SEPARATORS = frozenset(" .")
TERMS = frozenset({"dog", "cat"})


class TestLink:
    
    def test_links_exact_tokens(self):
        result = link("The dog chased the cat.", SEPARATORS, TERMS)
        assert result == (
            'The <a href="dog.html">dog</a> chased the '
            '<a href="cat.html">cat</a>.'
        )
    
    def test_no_partial_token_match(self):
        assert link("dogs bark", SEPARATORS, TERMS) == "dogs bark"
    
    def test_case_sensitive(self):
        assert link("Dog", SEPARATORS, TERMS) == "Dog"
    
    def test_empty_text(self):
        assert link("", SEPARATORS, TERMS) == ""
    
    def test_no_terms(self):
        text = "nothing to link here."
        assert link(text, SEPARATORS, frozenset()) == text
    
    def test_custom_suffix(self):
        assert link("dog", SEPARATORS, TERMS, suffix=".htm") == '<a href="dog.htm">dog</a>'
    
    def test_multi_word_term_never_matches(self):
        # A name containing a separator can never be a single token
        assert link("hot dog", SEPARATORS, frozenset({"hot dog"})) == "hot dog"
    
    def test_separator_only_term_matches_whole_token(self):
        terms = frozenset({"."})
        assert link("a.b", SEPARATORS, terms) == 'a<a href="..html">.</a>b'
        assert link("a..b", SEPARATORS, terms) == "a..b"
    
    def test_anchor(self):
        assert anchor("cat") == '<a href="cat.html">cat</a>'
    
    @pytest.mark.parametrize("text", [
        "The dog chased the cat.",
        "a dog, a cat (and a bird)!",
        "html href a dog.html",
        "cat cat cat",
    ])
    def test_relinking_adds_no_anchors(self, text):
        terms = frozenset({"dog", "cat", "a", "html", "href", "bird"})
        once = link(text, DEFAULT_SEPARATORS, terms)
        twice = link(once, DEFAULT_SEPARATORS, terms)
        assert twice == once
        assert twice.count("<a ") == once.count("<a ")


class TestDefinitionLinker:
    
    @pytest.fixture
    def store(self):
        store = TermStore()
        store.add("A", "refers to B.")
        store.add("B", "is independent.")
        return store
    
    def test_link_term(self, store):
        linker = DefinitionLinker(store)
        assert linker.link_term("A") == 'refers to <a href="B.html">B</a>.'
        assert linker.link_term("B") == "is independent."
    
    def test_find_references(self, store):
        linker = DefinitionLinker(store)
        assert linker.find_references("B and A, then B again") == ["B", "A"]
        assert linker.find_references("nothing") == []
    
    def test_count_links(self, store):
        linker = DefinitionLinker(store)
        assert linker.count_links("B and A, then B again") == 3
    
    def test_store_not_mutated(self, store):
        before = (store.names, store.definition("A"))
        DefinitionLinker(store).link_term("A")
        assert (store.names, store.definition("A")) == before
