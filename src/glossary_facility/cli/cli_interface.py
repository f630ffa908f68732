#!/usr/bin/env python3
"""
Glossary Facility - Command Line Interface
"""
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.exceptions import GlossaryFacilityError
from ..core.factory import GlossaryFactory
from ..core.interfaces import IProgressCallback
from ..core.models import BuildJob
from ..utils.config_manager import ConfigManager
from ..utils.logger import setup_logging, get_logger


console = Console()
logger = get_logger(__name__)


class RichProgressCallback(IProgressCallback):
    """Progress callback using Rich library."""
    
    def __init__(self, progress: Progress, task_id):
        self.progress = progress
        self.task_id = task_id
    
    def on_start(self, job: BuildJob) -> None:
        # One page per term plus the index
        self.progress.update(self.task_id, total=job.total_terms + 1)
    
    def on_page_written(self, job: BuildJob, path: Path) -> None:
        self.progress.update(self.task_id, completed=job.pages_written)
    
    def on_complete(self, job: BuildJob) -> None:
        pass
    
    def on_error(self, job: BuildJob, error: Exception) -> None:
        self.progress.update(self.task_id, description="[red]Failed")


def _print_summary(job: BuildJob) -> None:
    table = Table(title="Build Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    
    table.add_row("Terms", str(job.total_terms))
    table.add_row("Pages written", str(job.pages_written))
    table.add_row("Links created", str(job.links_created))
    table.add_row("Duplicate names", str(len(job.duplicates)))
    table.add_row("Duration", f"{job.duration:.2f}s")
    
    console.print(table)
    
    if job.duplicates:
        console.print(
            f"\n[yellow]Warning: replaced definitions for "
            f"{', '.join(sorted(set(job.duplicates)))}[/yellow]"
        )


@click.command()
@click.version_option(version=__version__)
@click.option(
    '--glossary', '-g', 'glossary_file',
    prompt='Please input the glossary file name',
    type=click.Path(path_type=Path),
    help='Glossary source file'
)
@click.option(
    '--output', '-o', 'output_dir',
    prompt='Please input the output folder name',
    type=click.Path(file_okay=False, path_type=Path),
    help='Folder receiving index.html and the term pages'
)
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='YAML or JSON config file'
)
@click.option('--verbose', '-v', is_flag=True, help='Show debug log on the console')
def cli(glossary_file: Path, output_dir: Path, config_path: Optional[Path], verbose: bool):
    """
    Generate cross-linked HTML pages from a glossary file.
    
    The glossary file holds blocks of a term name line followed by
    definition lines, each block ending with a blank line.
    
    Examples:
    
        glossary-facility
        
        glossary-facility -g terms.txt -o site
    """
    try:
        config = ConfigManager(config_path).config
        log_cfg = config.logging
        setup_logging(
            log_dir=Path(log_cfg.log_dir) if log_cfg.file_logging else None,
            log_level=log_cfg.log_level,
            console_level="DEBUG" if verbose else log_cfg.console_level,
            use_colors=log_cfg.use_colors,
            max_bytes=log_cfg.max_bytes,
            backup_count=log_cfg.backup_count
        )
        
        pipeline = GlossaryFactory.create_pipeline(config)
        
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console
        ) as progress:
            task = progress.add_task("[cyan]Writing pages...", total=None)
            callback = RichProgressCallback(progress, task)
            
            job = pipeline.build(glossary_file, output_dir, progress_callback=callback)
        
        console.print(f"\n[bold green]✓ Glossary generated![/bold green]")
        console.print(f"[dim]Index: {escape(str(job.index_file))}[/dim]\n")
        _print_summary(job)
        
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(1)
    except GlossaryFacilityError as e:
        logger.debug("Build failed", exc_info=True)
        console.print(f"\n[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == '__main__':
    cli()
