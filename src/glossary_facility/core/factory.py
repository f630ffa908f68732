"""
Factory for building a configured GlossaryPipeline.
"""
import logging
from functools import partial
from typing import Optional

from .exceptions import ConfigurationError
from .models import DuplicatePolicy, MalformedPolicy
from .pipeline import GlossaryPipeline
from ..formatters.html_formatter import HtmlPageRenderer
from ..formatters.page_sink import DirectoryPageSink
from ..glossary.term_store import TermStore
from ..parsers.glossary_parser import GlossaryParser
from ..utils.config_manager import AppConfig, BuildConfig
from ..utils.tokenizer import separator_set


logger = logging.getLogger(__name__)


class GlossaryFactory:
    """Builds pipeline components from configuration."""
    
    @staticmethod
    def create_renderer(build: BuildConfig) -> HtmlPageRenderer:
        return HtmlPageRenderer(
            suffix=build.page_suffix,
            index_filename=build.index_filename,
            title=build.title
        )
    
    @staticmethod
    def create_pipeline(config: Optional[AppConfig] = None) -> GlossaryPipeline:
        """
        Create a fully configured glossary pipeline.
        
        Args:
            config: Application config (defaults if None)
            
        Returns:
            Configured GlossaryPipeline
            
        Raises:
            ConfigurationError: If a policy value is not recognised
        """
        build = (config or AppConfig()).build
        
        try:
            duplicate_policy = DuplicatePolicy(build.duplicate_policy)
            malformed_policy = MalformedPolicy(build.malformed_policy)
        except ValueError as e:
            raise ConfigurationError(str(e), component='build') from e
        
        logger.info(
            f"Creating glossary pipeline: duplicates={duplicate_policy.value}, "
            f"malformed={malformed_policy.value}"
        )
        
        return GlossaryPipeline(
            parser=GlossaryParser(malformed_policy),
            renderer=GlossaryFactory.create_renderer(build),
            separators=separator_set(build.separators),
            suffix=build.page_suffix,
            store_factory=partial(
                TermStore,
                duplicate_policy,
                page_suffix=build.page_suffix,
                reserved_pages=(build.index_filename,)
            ),
            sink_factory=partial(
                DirectoryPageSink,
                create=build.create_output_dir,
                encoding=build.encoding
            ),
            encoding=build.encoding
        )
