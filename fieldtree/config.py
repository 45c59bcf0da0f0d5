"""
Configuration management for fieldtree.

This module handles loading and accessing configuration values from config.yaml.
Editor limits, validity sections and identifier settings live here so they can
be tuned without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List
import logging


class ConfigManager:
    """
    Manages configuration loading and access for fieldtree.
    """
    
    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.
        
        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()
    
    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            logging.debug(f"Configuration file not found: {self.config_path}, using defaults")
            self._config = self._get_default_config()
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}

            self._config = self._merge(self._get_default_config(), loaded)
            logging.info(f"Configuration loaded from {self.config_path}")
            
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            # Fall back to default configuration
            self._config = self._get_default_config()

    @staticmethod
    def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively overlay the loaded values on top of the defaults."""
        merged = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = ConfigManager._merge(merged[key], value)
            else:
                merged[key] = value
        return merged
            
    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "editor": {
                "max_nested_depth": 4
            },
            "validity": {
                "sections": ["configuration", "fields_json_editor", "field_form"]
            },
            "ids": {
                "prefix": "field_"
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "output": {
                "indent": 2,
                "tree_indent": "  "
            }
        }
    
    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.
        
        Args:
            key_path: Dot-separated path to the configuration value (e.g., "editor.max_nested_depth")
            default: Default value if key is not found
            
        Returns:
            The configuration value
            
        Examples:
            config.get("editor.max_nested_depth")  # Returns 4
            config.get("validity.sections")  # Returns ["configuration", ...]
        """
        keys = key_path.split('.')
        value = self._config
        
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
                
        return value
    
    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.
        
        Args:
            section: Name of the configuration section
            
        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})
    
    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
    
    # Convenience properties for commonly used values
    
    @property
    def max_nested_depth(self) -> int:
        """Get the nesting ceiling above which the form editor is unusable."""
        return self.get("editor.max_nested_depth", 4)
    
    @property
    def validity_sections(self) -> List[str]:
        """Get the state sections that count toward overall validity."""
        return self.get("validity.sections", ["configuration", "fields_json_editor", "field_form"])
    
    @property
    def id_prefix(self) -> str:
        """Get the prefix used by sequential identifier generators."""
        return self.get("ids.prefix", "field_")
    
    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return self.get("logging.level", "INFO")
    
    @property
    def log_format(self) -> str:
        """Get logging format string."""
        return self.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.
    
    Returns:
        The global ConfigManager instance
    """
    return config
