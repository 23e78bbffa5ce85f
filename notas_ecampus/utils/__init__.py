"""
Utilities Package - Low-level helpers
- Configuration loading
- Interactive prompts
- Credential resolution
- Console table rendering
"""

from .config import Config, ConfigError, load_config, scrub_credentials
from .prompts import ask_input, ask_selector, PromptConfigError, PromptAborted
from .credentials import Credentials, resolve_credentials
from .table import render_table, print_table

__all__ = [
    'Config',
    'ConfigError',
    'load_config',
    'scrub_credentials',
    'ask_input',
    'ask_selector',
    'PromptConfigError',
    'PromptAborted',
    'Credentials',
    'resolve_credentials',
    'render_table',
    'print_table'
]
