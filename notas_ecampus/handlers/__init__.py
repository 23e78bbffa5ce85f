"""
Handlers Package - Business logic layer
- Grades panel navigation and extraction
"""

from .grades_handler import GradesHandler, GradesReport, SelectedTerm

__all__ = [
    'GradesHandler',
    'GradesReport',
    'SelectedTerm'
]
