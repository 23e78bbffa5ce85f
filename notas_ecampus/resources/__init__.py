"""
Resources Package - Website interaction layer
- Session management and browser control
- Web scraping and data extraction
- Portal selectors
"""

from .session_manager import SessionManager
from .web_scraper import (
    WebScraper,
    TermOption,
    ElementNotFoundError,
    GradesTableNotFound,
    parse_grades_table,
    parse_term_options
)
from .selectors import Module, Menu, Panel

__all__ = [
    'SessionManager',
    'WebScraper',
    'TermOption',
    'ElementNotFoundError',
    'GradesTableNotFound',
    'parse_grades_table',
    'parse_term_options',
    'Module',
    'Menu',
    'Panel'
]
