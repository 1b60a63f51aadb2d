"""Playwright connection to a remote browser, used only to generate recorded activity."""

import logging

from playwright.async_api import Browser, Page, Playwright, async_playwright

logger = logging.getLogger(__name__)


class PlaywrightDriver:
	"""Handle on a page of a remote browser reached over CDP"""

	def __init__(self, playwright: Playwright, browser: Browser, page: Page):
		self.playwright = playwright
		self.browser = browser
		self.page = page
		self._detached = False

	@classmethod
	async def attach(cls, cdp_ws_url: str) -> 'PlaywrightDriver':
		"""Connect over CDP and reuse the first context and page, creating them if missing"""
		playwright = await async_playwright().start()
		try:
			browser = await playwright.chromium.connect_over_cdp(cdp_ws_url)
			context = browser.contexts[0] if browser.contexts else await browser.new_context()
			page = context.pages[0] if context.pages else await context.new_page()
		except Exception:
			await playwright.stop()
			raise
		return cls(playwright, browser, page)

	async def navigate(self, url: str) -> None:
		await self.page.goto(url)

	async def wait_for_idle(self) -> None:
		await self.page.wait_for_load_state('networkidle')

	async def click(self, selector: str) -> None:
		await self.page.click(selector)

	async def detach(self) -> None:
		if self._detached:
			return
		self._detached = True
		try:
			await self.browser.close()
		finally:
			await self.playwright.stop()
