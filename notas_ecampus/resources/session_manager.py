"""
Session Manager - Browser session and login handling
Manages Playwright browser lifecycle and authentication
"""

import logging
from typing import Optional

from playwright.async_api import Browser, Page, async_playwright

from ..utils.config import DEFAULT_TIMEOUT_MS
from ..utils.credentials import Credentials
from . import selectors as S
from .web_scraper import WebScraper, collapse_whitespace, ElementNotFoundError

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages browser session and authentication"""

    def __init__(self, headless: bool = True, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.headless = headless
        self.timeout_ms = timeout_ms
        self.browser: Optional[Browser] = None
        self.page: Optional[Page] = None
        self.playwright = None

    async def start(self):
        """Initialize browser"""
        logger.info(f"Starting browser (headless={self.headless})...")
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(
            headless=self.headless,
            args=['--no-sandbox']
        )
        self.page = await self.browser.new_page()
        logger.info("Browser started")

    async def stop(self):
        """Close browser and cleanup, each step runs even if a previous one failed"""
        page, browser, playwright = self.page, self.browser, self.playwright
        self.page = self.browser = self.playwright = None

        if page:
            try:
                await page.close()
            except Exception as e:
                logger.warning(f"Error closing page: {e}")
        if browser:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
        if playwright:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping playwright: {e}")
        logger.info("Browser stopped")

    async def click_and_wait_navigation(self, selector: str, wait_until: str = 'networkidle'):
        return await WebScraper.click_and_wait_navigation(self.page, selector, wait_until)

    async def login(self, credentials: Credentials) -> str:
        """
        Log into eCampus

        Args:
            credentials: Login (CPF) and password

        Returns:
            str: Session information shown after login
        """
        if not self.page:
            raise RuntimeError("Browser not started. Call start() first.")

        await self.page.goto(S.ENTRY_URL, wait_until='domcontentloaded', timeout=self.timeout_ms)
        logger.info("Login page loaded")

        await self.page.fill(S.LOGIN_USER, credentials.login)
        logger.info("CPF filled")

        await self.page.fill(S.LOGIN_PASS, credentials.password)
        logger.info("Password filled")

        await self.click_and_wait_navigation(S.LOGIN_SUBMIT)
        logger.info("Login successful")

        session = await self.page.text_content(S.SESSION_INFO)
        if session is None:
            raise ElementNotFoundError("`Informação de sessão` not found")
        return collapse_whitespace(session)

    async def __aenter__(self):
        """Context manager entry"""
        try:
            await self.start()
        except BaseException:
            await self.stop()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.stop()
