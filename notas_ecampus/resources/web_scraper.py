"""
Web Scraper - Low-level portal interaction
Handles navigation clicks on ecampus.ufam.edu.br
Includes HTML parsing of the grades table and term selector
"""

import logging
import re
from typing import Callable, List, NamedTuple, Sequence

from playwright.async_api import Page, Response
from bs4 import BeautifulSoup

from . import selectors as S
from .selectors import Menu, Module, Panel

logger = logging.getLogger(__name__)


class ElementNotFoundError(RuntimeError):
    """Raised when an expected element is missing from the page"""


class GradesTableNotFound(ElementNotFoundError):
    """Raised when the grades table is missing from the page"""


class TermOption(NamedTuple):
    text: str
    key: str


# ============================================================================
# HTML PARSING HELPERS
# ============================================================================

RE_SPACES = re.compile(r"\s+")

# Cell whose markup is a link, not displayable as text
EFFECTIVE_GRADES_MARKER = "Notas Efetivadas"
EFFECTIVE_GRADES_PLACEHOLDER = "#"


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs into one space and trim"""
    return RE_SPACES.sub(" ", text or "").strip()


def cell_text(el) -> str:
    """Extract display text from a table cell"""
    if EFFECTIVE_GRADES_MARKER in el.decode_contents():
        return EFFECTIVE_GRADES_PLACEHOLDER
    return collapse_whitespace(el.get_text())


def filter_columns(values: Sequence[str], columns: Sequence[int] = S.GRADES_COLUMNS) -> List[str]:
    """
    Keep only the given column indices, in order

    Missing cells are padded with an empty string so every row
    ends up with len(columns) cells.
    """
    return [values[i] if i < len(values) else "" for i in columns]


def parse_grades_table(html: str,
                       extract: Callable = cell_text,
                       columns: Sequence[int] = S.GRADES_COLUMNS) -> List[List[str]]:
    """
    Serialize the grades table from HTML

    Args:
        html: Raw HTML content
        extract: Cell to text callback
        columns: Column indices to keep

    Returns:
        List of rows, row 0 is the header
    """
    soup = BeautifulSoup(html, "lxml")
    table = soup.select_one(S.GRADES_TABLE)
    if table is None:
        raise GradesTableNotFound("`Tabela de notas` not found")

    rows = table.find_all("tr")
    if not rows:
        raise ElementNotFoundError("`Tabela de notas` has no header row")

    head, *body = rows
    serialized = [filter_columns([extract(th) for th in head.find_all("th")], columns)]

    for tr in body:
        serialized.append(filter_columns([extract(td) for td in tr.find_all("td")], columns))

    logger.debug(f"Parsed grades table: {len(serialized) - 1} rows")
    return serialized


def parse_term_options(html: str) -> List[TermOption]:
    """Parse the <option>s of the term selector"""
    soup = BeautifulSoup(html, "lxml")
    return [
        TermOption(text=(opt.get_text() or "").strip(), key=opt.get("value", ""))
        for opt in soup.select(S.TERM_OPTIONS)
    ]


# ============================================================================
# PAGE INTERACTION
# ============================================================================

class WebScraper:
    """Low-level page operations"""

    @staticmethod
    async def click_and_wait_navigation(page: Page, selector: str, wait_until: str = 'networkidle'):
        """Click and wait for the navigation the click triggers"""
        async with page.expect_navigation(wait_until=wait_until) as navigation:
            await page.click(selector)
        return await navigation.value

    @staticmethod
    async def select_module(page: Page, module: Module):
        await WebScraper.click_and_wait_navigation(page, module.selector)
        logger.info(f"Module '{module.label}' opened")

    @staticmethod
    async def select_menu(page: Page, menu: Menu):
        # Tabs expand in place, no navigation
        await page.click(menu.selector)
        logger.info(f"Menu '{menu.label}' expanded")

    @staticmethod
    async def select_panel(page: Page, panel: Panel):
        await WebScraper.click_and_wait_navigation(page, panel.selector)
        logger.info(f"Panel '{panel.label}' opened")

    @staticmethod
    async def read_term_options(page: Page) -> List[TermOption]:
        """
        Read available terms from the panel page

        Raises:
            ElementNotFoundError: If the term selector has no options
        """
        options = parse_term_options(await page.content())
        if not options:
            raise ElementNotFoundError("`Período` selector has no options")
        logger.debug(f"Found {len(options)} term options")
        return options

    @staticmethod
    async def select_term(page: Page, key: str):
        await page.select_option(S.TERM_SELECT, key)

    @staticmethod
    async def read_selected_term(page: Page):
        """
        Returns: (year, period label) of the selected term
        """
        year = await page.input_value(S.YEAR_INPUT)
        period = await page.eval_on_selector(
            S.TERM_SELECT, "el => el.selectedOptions[0] ? el.selectedOptions[0].text : ''"
        )
        return collapse_whitespace(year), collapse_whitespace(period)

    @staticmethod
    async def search_grades(page: Page) -> Response:
        """Click search and wait for the grades endpoint to answer"""
        async with page.expect_response(S.GRADES_ENDPOINT) as response_info:
            await page.click(S.SEARCH_BUTTON)
        response = await response_info.value
        logger.info(f"Grades endpoint answered ({response.status})")
        return response

    @staticmethod
    async def scrape_grades(page: Page) -> List[List[str]]:
        """Serialize the grades table currently shown"""
        logger.info("Scraping grades table...")
        rows = parse_grades_table(await page.content())
        logger.info(f"Found {len(rows) - 1} grade rows")
        return rows
