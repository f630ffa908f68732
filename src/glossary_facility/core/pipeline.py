"""
Glossary build pipeline.

parse -> term store -> link each definition -> render and write each page.
Everything runs sequentially; the glossary source is closed before the
first output file is opened.
"""
from datetime import datetime
from pathlib import Path
from typing import AbstractSet, Callable, Dict, Optional
import logging
import uuid

from .exceptions import GlossaryFacilityError, GlossaryPipelineError, error_context
from .interfaces import ILineSource, IPageRenderer, IPageSink, IProgressCallback
from .models import (
    BuildJob, BuildStatus, DEFAULT_ENCODING, DEFAULT_PAGE_SUFFIX, DEFAULT_SEPARATORS,
    RenderedPage
)
from ..glossary.linker import DefinitionLinker
from ..glossary.term_store import TermStore
from ..parsers.glossary_parser import GlossaryParser
from ..parsers.line_source import FileLineSource
from ..formatters.page_sink import DirectoryPageSink


logger = logging.getLogger(__name__)


SourceFactory = Callable[[Path], ILineSource]
SinkFactory = Callable[[Path], IPageSink]
StoreFactory = Callable[[], TermStore]


class GlossaryPipeline:
    """Builds the cross-linked HTML pages of one glossary."""
    
    def __init__(
        self,
        parser: GlossaryParser,
        renderer: IPageRenderer,
        separators: AbstractSet[str] = DEFAULT_SEPARATORS,
        suffix: str = DEFAULT_PAGE_SUFFIX,
        store_factory: StoreFactory = TermStore,
        source_factory: Optional[SourceFactory] = None,
        sink_factory: Optional[SinkFactory] = None,
        encoding: str = DEFAULT_ENCODING
    ):
        self.parser = parser
        self.renderer = renderer
        self.separators = frozenset(separators)
        self.suffix = suffix
        self.store_factory = store_factory
        self.source_factory = source_factory or (
            lambda path: FileLineSource(path, encoding=encoding)
        )
        self.sink_factory = sink_factory or (
            lambda path: DirectoryPageSink(path, encoding=encoding)
        )
    
    def load_store(self, glossary_path: Path) -> TermStore:
        """Parse the glossary file into a fresh TermStore."""
        store = self.store_factory()
        with self.source_factory(glossary_path) as source:
            self.parser.load(source, store)
        return store
    
    def build(
        self,
        glossary_path: Path,
        output_dir: Path,
        progress_callback: Optional[IProgressCallback] = None
    ) -> BuildJob:
        """
        Build the index page and one page per term.
        
        Args:
            glossary_path: Glossary source file
            output_dir: Directory receiving the pages
            progress_callback: Optional progress hooks
            
        Returns:
            Completed BuildJob
            
        Raises:
            GlossaryFacilityError: On any failure; the job is marked FAILED
        """
        job = BuildJob(
            job_id=str(uuid.uuid4()),
            glossary_file=Path(glossary_path),
            output_dir=Path(output_dir)
        )
        job.started_at = datetime.now()
        
        logger.info(f"Build {job.job_id}: {job.glossary_file} -> {job.output_dir}")
        
        try:
            job.status = BuildStatus.PARSING
            with error_context("parsing glossary", GlossaryPipelineError, logger):
                store = self.load_store(job.glossary_file)
            job.total_terms = len(store)
            job.duplicates = store.duplicates
            
            if progress_callback:
                progress_callback.on_start(job)
            
            job.status = BuildStatus.LINKING
            linker = DefinitionLinker(store, self.separators, self.suffix)
            linked: Dict[str, str] = {}
            for name in store:
                definition = store.definition(name)
                linked[name] = linker.link(definition)
                job.links_created += linker.count_links(definition)
            
            job.status = BuildStatus.RENDERING
            with error_context("writing pages", GlossaryPipelineError, logger):
                sink = self.sink_factory(job.output_dir)
                for name in store:
                    page = self.renderer.render_term_page(name, linked[name])
                    self._write(sink, page, job, progress_callback)
                
                index_page = self.renderer.render_index_page(store.names)
                self._write(sink, index_page, job, progress_callback)
            
            job.status = BuildStatus.COMPLETED
            job.completed_at = datetime.now()
            
            logger.info(
                f"Build {job.job_id} completed: {job.total_terms} terms, "
                f"{job.pages_written} pages, {job.links_created} links "
                f"in {job.duration:.2f}s"
            )
            
            if progress_callback:
                progress_callback.on_complete(job)
            
            return job
            
        except GlossaryFacilityError as e:
            self._fail(job, e, progress_callback)
            raise
        except Exception as e:
            self._fail(job, e, progress_callback)
            raise GlossaryPipelineError(
                f"Build failed: {e}", stage=job.status.value
            ) from e
    
    def _write(
        self,
        sink: IPageSink,
        page: RenderedPage,
        job: BuildJob,
        progress_callback: Optional[IProgressCallback]
    ) -> None:
        path = sink.write(page)
        job.pages_written += 1
        job.written_files.append(path)
        if progress_callback:
            progress_callback.on_page_written(job, path)
    
    def _fail(
        self,
        job: BuildJob,
        error: Exception,
        progress_callback: Optional[IProgressCallback]
    ) -> None:
        stage = job.status.value
        job.status = BuildStatus.FAILED
        job.completed_at = datetime.now()
        job.errors.append(str(error))
        logger.error(f"Build {job.job_id} failed during {stage}: {error}")
        
        if progress_callback:
            progress_callback.on_error(job, error)
    
    def get_health(self) -> Dict[str, object]:
        return {
            'renderer': self.renderer.get_renderer_info(),
            'separators': ''.join(sorted(self.separators)),
            'suffix': self.suffix,
            'duplicate_policy': self.store_factory().duplicate_policy.value,
            'malformed_policy': self.parser.malformed_policy.value,
        }
