"""
Grades Handler - Navigation sequence for the grades panel
Coordinates login, menu navigation, term selection and table scraping
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..resources import SessionManager, WebScraper, TermOption, Module, Menu, Panel
from ..utils import Credentials, ask_selector

logger = logging.getLogger(__name__)

TERM_PROMPT = 'Selecione o período que deseja ver'


@dataclass
class SelectedTerm:
    year: str
    period: str

    def __str__(self):
        return f"{self.year}/{self.period}"


@dataclass
class GradesReport:
    session: str
    term: SelectedTerm
    rows: List[List[str]]


class GradesHandler:
    """Handles the grades panel workflow"""

    def __init__(self, session: SessionManager, term: Optional[str] = None,
                 chooser: Optional[Callable] = ask_selector):
        """
        Args:
            session: Started session manager
            term: Term key to select, skips the chooser
            chooser: Interactive selector (message, options) -> key or None.
                None always takes the first term.
        """
        self.session = session
        self.term = term
        self.chooser = chooser

    def _choose_term(self, options: List[TermOption]) -> str:
        if self.term:
            if self.term not in [o.key for o in options]:
                raise ValueError(f"Unknown term '{self.term}', available: "
                                 f"{', '.join(o.key for o in options)}")
            return self.term

        choice = None
        if self.chooser:
            choice = self.chooser(TERM_PROMPT, options)
        return choice or options[0].key

    async def select_term(self) -> SelectedTerm:
        """Pick a term, apply it and wait for the grades to load"""
        page = self.session.page

        options = await WebScraper.read_term_options(page)
        key = self._choose_term(options)
        await WebScraper.select_term(page, key)

        year, period = await WebScraper.read_selected_term(page)
        term = SelectedTerm(year=year, period=period)

        await WebScraper.search_grades(page)
        logger.info(f"Selected term: {term}")
        return term

    async def fetch_grades(self, credentials: Credentials) -> GradesReport:
        """
        Run the whole sequence on an open session

        Returns:
            GradesReport with session info, term and serialized table
        """
        session_info = await self.session.login(credentials)
        logger.info(f"Session: {session_info}")

        page = self.session.page
        await WebScraper.select_module(page, Module.ALUNO)
        await WebScraper.select_menu(page, Menu.CONSULTAS)
        await WebScraper.select_panel(page, Panel.NOTAS_FREQUENCIA)

        term = await self.select_term()
        rows = await WebScraper.scrape_grades(page)

        return GradesReport(session=session_info, term=term, rows=rows)
