"""Headless browser helper for venues that render listings with JavaScript."""

import asyncio
import logging

from playwright.async_api import Page, async_playwright
from playwright_stealth import Stealth

from dcscreenings.config import settings

logger = logging.getLogger(__name__)

# Scroll to the bottom in steps so lazy-loaded cards render
SCROLL_SCRIPT = """
async () => {
    await new Promise((resolve) => {
        let totalHeight = 0;
        const distance = 500;
        const timer = setInterval(() => {
            window.scrollBy(0, distance);
            totalHeight += distance;
            if (totalHeight >= document.body.scrollHeight) {
                clearInterval(timer);
                resolve();
            }
        }, 100);
    });
}
"""


async def render_page(
    url: str,
    *,
    warmup_url: str | None = None,
    wait_for: str | None = None,
    scroll: bool = False,
    settle_seconds: float = 2.0,
    stealth: bool = False,
    inner_text: bool = False,
) -> str:
    """
    Load a page in headless Chromium and return its rendered content.

    Args:
        url: Page to load
        warmup_url: Optional page to visit first (sets cookies/location)
        wait_for: Optional CSS selector to wait for; a timeout is only logged
        scroll: Scroll to the bottom to trigger lazy loading
        settle_seconds: Pause after load (and after scrolling) for scripts to finish
        stealth: Apply playwright-stealth evasions for bot-protected sites
        inner_text: Return the body's visible text instead of the HTML

    Returns:
        Rendered HTML (or visible text)

    Raises:
        playwright.async_api.Error: On navigation failure or timeout
    """
    playwright_cm = async_playwright()
    if stealth:
        playwright_cm = Stealth().use_async(playwright_cm)

    async with playwright_cm as p:
        browser = await p.chromium.launch(
            headless=settings.browser_headless,
            args=["--no-sandbox", "--disable-setuid-sandbox", "--disable-dev-shm-usage"],
        )
        try:
            context = await browser.new_context(
                user_agent=settings.user_agent,
                viewport={"width": 1280, "height": 1600},
                locale="en-US",
                timezone_id=settings.timezone,
            )
            page = await context.new_page()

            if warmup_url:
                await _goto(page, warmup_url)
                await asyncio.sleep(settle_seconds)

            await _goto(page, url)

            if wait_for:
                try:
                    await page.wait_for_selector(wait_for, timeout=settings.browser_timeout_ms)
                except Exception as e:
                    logger.warning(f"Timed out waiting for {wait_for!r} on {url}: {e}")

            await asyncio.sleep(settle_seconds)

            if scroll:
                await page.evaluate(SCROLL_SCRIPT)
                await asyncio.sleep(settle_seconds)

            if inner_text:
                return await page.inner_text("body")
            return await page.content()
        finally:
            await browser.close()


async def _goto(page: Page, url: str) -> None:
    logger.debug(f"Navigating to {url}")
    await page.goto(url, wait_until="networkidle", timeout=settings.browser_timeout_ms)
