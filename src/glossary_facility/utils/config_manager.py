"""
Configuration manager for loading settings from YAML/JSON files.
"""
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, fields
import os
from dotenv import load_dotenv

from ..core.exceptions import InvalidConfigError
from ..core.models import (
    DEFAULT_ENCODING, DEFAULT_INDEX_FILENAME, DEFAULT_PAGE_SUFFIX,
    DEFAULT_SEPARATOR_CHARS, DEFAULT_TITLE, DuplicatePolicy, MalformedPolicy
)


@dataclass
class BuildConfig:
    """Configuration for building the glossary pages."""
    separators: str = DEFAULT_SEPARATOR_CHARS
    page_suffix: str = DEFAULT_PAGE_SUFFIX
    index_filename: str = DEFAULT_INDEX_FILENAME
    title: str = DEFAULT_TITLE
    encoding: str = DEFAULT_ENCODING
    duplicate_policy: str = DuplicatePolicy.REPLACE.value
    malformed_policy: str = MalformedPolicy.STRICT.value
    create_output_dir: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    console_level: str = "WARNING"
    file_logging: bool = True
    max_bytes: int = 10_000_000
    backup_count: int = 5
    use_colors: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    build: BuildConfig = field(default_factory=BuildConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Configuration manager for loading application settings.
    Supports YAML and JSON formats, environment variables, and defaults.
    """
    
    ENV_OVERRIDES = {
        'GLOSSARY_SEPARATORS': 'build.separators',
        'GLOSSARY_DUPLICATE_POLICY': 'build.duplicate_policy',
        'GLOSSARY_MALFORMED_POLICY': 'build.malformed_policy',
        'GLOSSARY_ENCODING': 'build.encoding',
        'LOG_LEVEL': 'logging.log_level',
    }
    
    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.
        
        Args:
            config_path: Path to config file (YAML or JSON). A missing file
                means defaults; nothing is written.
        """
        self.config_path = Path(config_path) if config_path else Path("glossary.yaml")
        self.config: AppConfig = AppConfig()
        
        # Load environment variables
        load_dotenv()
        
        self.load()
    
    def load(self) -> AppConfig:
        """
        Load configuration from file, then apply environment overrides.
        
        Returns:
            AppConfig instance
        """
        if self.config_path.exists():
            try:
                if self.config_path.suffix in ['.yaml', '.yml']:
                    data = self._load_yaml()
                elif self.config_path.suffix == '.json':
                    data = self._load_json()
                else:
                    raise InvalidConfigError(
                        f"Unsupported config format: {self.config_path.suffix}",
                        field='config_path'
                    )
            except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
                raise InvalidConfigError(
                    f"Cannot read config file {self.config_path}: {e}",
                    field='config_path'
                ) from e
            self.config = self._parse_config(data)
        else:
            self.config = AppConfig()
        
        self._apply_env_vars()
        self.validate()
        
        return self.config
    
    def set(self, key: str, value: Any):
        """
        Set configuration value by dot notation key.
        
        Args:
            key: Configuration key
            value: Value to set
        """
        parts = key.split('.')
        obj = self.config
        
        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise KeyError(f"Invalid config key: {key}")
        
        if not hasattr(obj, parts[-1]):
            raise KeyError(f"Invalid config key: {key}")
        
        setattr(obj, parts[-1], value)
    
    def validate(self) -> None:
        """Check values that cannot be expressed by the dataclass types."""
        build = self.config.build
        
        try:
            DuplicatePolicy(build.duplicate_policy)
        except ValueError:
            raise InvalidConfigError(
                f"Invalid duplicate policy: {build.duplicate_policy!r}",
                field='build.duplicate_policy'
            ) from None
        
        try:
            MalformedPolicy(build.malformed_policy)
        except ValueError:
            raise InvalidConfigError(
                f"Invalid malformed policy: {build.malformed_policy!r}",
                field='build.malformed_policy'
            ) from None
        
        if not build.separators:
            raise InvalidConfigError("Separator set cannot be empty", field='build.separators')
        
        if not build.index_filename or '/' in build.index_filename:
            raise InvalidConfigError(
                f"Invalid index file name: {build.index_filename!r}",
                field='build.index_filename'
            )
    
    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML config file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    
    def _load_json(self) -> Dict[str, Any]:
        """Load JSON config file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    
    def _parse_config(self, data: Dict[str, Any]) -> AppConfig:
        """Parse dictionary to AppConfig."""
        if not isinstance(data, dict):
            raise InvalidConfigError("Config file must contain a mapping", field='config_path')
        
        unknown = set(data) - {f.name for f in fields(AppConfig)}
        if unknown:
            raise InvalidConfigError(f"Unknown config sections: {sorted(unknown)}", field='config_path')
        
        config = AppConfig()
        
        try:
            if 'build' in data:
                config.build = BuildConfig(**(data['build'] or {}))
            
            if 'logging' in data:
                config.logging = LoggingConfig(**(data['logging'] or {}))
        except TypeError as e:
            raise InvalidConfigError(f"Invalid config entry: {e}", field='config_path') from e
        
        return config
    
    def _apply_env_vars(self):
        """Override config with environment variables."""
        for env_name, key in self.ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                self.set(key, value)
