"""
Main entry point for running as module: python -m glossary_facility
"""
from glossary_facility.cli import cli

if __name__ == '__main__':
    cli()
