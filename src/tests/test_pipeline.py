"""Tests for the glossary build pipeline and factory."""
from unittest.mock import Mock

import pytest

from glossary_facility.core.exceptions import (
    ConfigurationError, DuplicateTermError, GlossaryReadError,
    InvalidTermError, MalformedBlockError, OutputError
)
from glossary_facility.core.factory import GlossaryFactory
from glossary_facility.core.interfaces import IProgressCallback
from glossary_facility.core.models import BuildStatus
from glossary_facility.core.pipeline import GlossaryPipeline
from glossary_facility.formatters.html_formatter import HtmlPageRenderer
from glossary_facility.parsers.glossary_parser import GlossaryParser
from glossary_facility.utils.config_manager import AppConfig


@pytest.fixture
def pipeline():
    return GlossaryFactory.create_pipeline()


@pytest.fixture
def site(temp_dir):
    return temp_dir / "site"


class TestBuild:
    
    def test_writes_all_pages(self, pipeline, glossary_file, site):
        job = pipeline.build(glossary_file, site)
        
        assert job.status == BuildStatus.COMPLETED
        assert job.total_terms == 5
        assert job.pages_written == 6
        assert sorted(p.name for p in site.iterdir()) == [
            "Book.html", "definition.html", "glossary.html",
            "index.html", "meaning.html", "term.html",
        ]
    
    def test_index_written_last_in_order(self, pipeline, glossary_file, site):
        job = pipeline.build(glossary_file, site)
        
        assert [p.name for p in job.written_files] == [
            "Book.html", "definition.html", "glossary.html",
            "meaning.html", "term.html", "index.html",
        ]
        assert job.index_file == site / "index.html"
    
    def test_index_lists_terms_alphabetically(self, pipeline, glossary_file, site):
        pipeline.build(glossary_file, site)
        index = (site / "index.html").read_text(encoding="utf-8")
        
        positions = [index.index(f'<a href="{name}.html">{name}</a>')
                     for name in ["Book", "definition", "glossary", "meaning", "term"]]
        assert positions == sorted(positions)
    
    def test_term_pages_are_linked(self, pipeline, glossary_file, site):
        job = pipeline.build(glossary_file, site)
        page = (site / "term.html").read_text(encoding="utf-8")
        
        assert (
            ' <blockquote>a word whose <a href="definition.html">definition</a> '
            'is in a <a href="glossary.html">glossary</a></blockquote>'
        ) in page
        assert '<p>Return to <a href="index.html">index</a></p>' in page
        assert job.links_created == 5
    
    def test_round_trip(self, pipeline, temp_dir, site):
        source = temp_dir / "ab.txt"
        source.write_text("A\nrefers to B.\n\nB\nis independent.\n", encoding="utf-8")
        
        pipeline.build(source, site)
        
        page_a = (site / "A.html").read_text(encoding="utf-8")
        page_b = (site / "B.html").read_text(encoding="utf-8")
        assert '<a href="B.html">B</a>' in page_a
        assert "<blockquote>is independent.</blockquote>" in page_b
        assert page_b.count("<a href=") == 1
    
    def test_callback_hooks(self, pipeline, glossary_file, site):
        callback = Mock(spec=IProgressCallback)
        job = pipeline.build(glossary_file, site, progress_callback=callback)
        
        callback.on_start.assert_called_once_with(job)
        assert callback.on_page_written.call_count == 6
        callback.on_complete.assert_called_once_with(job)
        callback.on_error.assert_not_called()
    
    def test_duplicates_reported(self, pipeline, temp_dir, site):
        source = temp_dir / "dup.txt"
        source.write_text("x\nfirst\n\ny\nwhy\n\nx\nsecond\n", encoding="utf-8")
        
        job = pipeline.build(source, site)
        
        assert job.duplicates == ["x"]
        assert job.total_terms == 2
        index = (site / "index.html").read_text(encoding="utf-8")
        assert index.count('<a href="x.html">') == 1
        assert "second" in (site / "x.html").read_text(encoding="utf-8")


class TestFailures:
    
    def test_missing_glossary_writes_nothing(self, pipeline, temp_dir, site):
        with pytest.raises(GlossaryReadError):
            pipeline.build(temp_dir / "missing.txt", site)
        assert not site.exists()
    
    def test_malformed_glossary_writes_nothing(self, pipeline, temp_dir, site):
        source = temp_dir / "bad.txt"
        source.write_text("A\none\n\nB\n", encoding="utf-8")
        callback = Mock(spec=IProgressCallback)
        
        with pytest.raises(MalformedBlockError):
            pipeline.build(source, site, progress_callback=callback)
        
        assert not site.exists()
        callback.on_error.assert_called_once()
        job = callback.on_error.call_args[0][0]
        assert job.status == BuildStatus.FAILED
        assert job.errors
    
    def test_term_named_like_index_page_writes_nothing(self, pipeline, temp_dir, site):
        source = temp_dir / "index_term.txt"
        source.write_text(
            "index\nan ordered list of entries\n\nbook\nhas an index\n", encoding="utf-8"
        )
        
        with pytest.raises(InvalidTermError) as exc_info:
            pipeline.build(source, site)
        
        assert exc_info.value.term == "index"
        assert not site.exists()
    
    def test_unwritable_output(self, pipeline, glossary_file, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("not a directory")
        
        with pytest.raises(OutputError):
            pipeline.build(glossary_file, blocker)
    
    def test_partial_output_not_rolled_back(self, glossary_file, site):
        sink = Mock()
        sink.write.side_effect = [site / "Book.html", OutputError("disk full")]
        pipeline = GlossaryPipeline(
            parser=GlossaryParser(),
            renderer=HtmlPageRenderer(),
            sink_factory=lambda path: sink
        )
        
        with pytest.raises(OutputError):
            pipeline.build(glossary_file, site)
        assert sink.write.call_count == 2
    
    def test_unexpected_error_wrapped(self, glossary_file, site):
        renderer = Mock(spec=HtmlPageRenderer)
        renderer.render_term_page.side_effect = RuntimeError("boom")
        pipeline = GlossaryPipeline(parser=GlossaryParser(), renderer=renderer)
        
        with pytest.raises(Exception) as exc_info:
            pipeline.build(glossary_file, site)
        assert "boom" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestFactory:
    
    def test_custom_config(self, glossary_file, site):
        config = AppConfig()
        config.build.page_suffix = ".htm"
        config.build.index_filename = "toc.htm"
        
        GlossaryFactory.create_pipeline(config).build(glossary_file, site)
        
        assert (site / "toc.htm").exists()
        assert '<a href="glossary.htm">glossary</a>' in (site / "term.htm").read_text(encoding="utf-8")
    
    def test_reject_duplicates(self, temp_dir, site):
        config = AppConfig()
        config.build.duplicate_policy = "reject"
        source = temp_dir / "dup.txt"
        source.write_text("x\nfirst\n\nx\nsecond\n", encoding="utf-8")
        
        with pytest.raises(DuplicateTermError):
            GlossaryFactory.create_pipeline(config).build(source, site)
    
    def test_lenient_malformed(self, temp_dir, site):
        config = AppConfig()
        config.build.malformed_policy = "lenient"
        source = temp_dir / "short.txt"
        source.write_text("A\nsee B\n\nB\n", encoding="utf-8")
        
        job = GlossaryFactory.create_pipeline(config).build(source, site)
        
        assert job.total_terms == 2
        assert "<blockquote></blockquote>" in (site / "B.html").read_text(encoding="utf-8")
    
    def test_custom_separators(self, temp_dir, site):
        config = AppConfig()
        config.build.separators = " -"
        source = temp_dir / "sep.txt"
        source.write_text("cat\nfeline\n\ndog\nnot-a-cat.\n", encoding="utf-8")
        
        GlossaryFactory.create_pipeline(config).build(source, site)
        
        assert 'not-a-cat.' in (site / "dog.html").read_text(encoding="utf-8")
    
    def test_term_named_like_custom_index_rejected(self, temp_dir, site):
        config = AppConfig()
        config.build.page_suffix = ".htm"
        config.build.index_filename = "toc.htm"
        source = temp_dir / "toc.txt"
        source.write_text("toc\ntable of contents\n\nindex\nallowed here\n", encoding="utf-8")
        
        with pytest.raises(InvalidTermError):
            GlossaryFactory.create_pipeline(config).build(source, site)
        assert not site.exists()
    
    def test_invalid_policy(self):
        config = AppConfig()
        config.build.malformed_policy = "sometimes"
        with pytest.raises(ConfigurationError):
            GlossaryFactory.create_pipeline(config)
    
    def test_health(self, pipeline):
        health = pipeline.get_health()
        assert health["duplicate_policy"] == "replace"
        assert health["malformed_policy"] == "strict"
        assert health["suffix"] == ".html"
