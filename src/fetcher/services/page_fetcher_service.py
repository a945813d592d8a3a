# src/fetcher/services/page_fetcher_service.py
import asyncio
import logging
import time
from typing import List, Optional

import aiohttp
from tqdm.asyncio import tqdm_asyncio

from fetcher.model import FetchedPage
from fetcher.services.generate_default_user_agent_service import generate_default_user_agent
from fetcher.utils.url_utils import UrlUtils
from seo_probe.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Retrieves the markup of a page over HTTP.

    Manages the aiohttp session and concurrency (semaphore). Every failure
    (timeout, transport error, non-200 status, non-HTML content) is logged
    and reported as None, never raised.
    """

    def __init__(
            self,
            timeout: Optional[float] = None,
            user_agent: Optional[str] = None,
            concurrency: Optional[int] = None
    ):
        self.timeout = float(timeout or config_manager.get_nested("fetcher.timeout", 5))
        self.read_timeout = float(config_manager.get_nested("fetcher.client_read_timeout", self.timeout))
        self.max_concurrency = int(concurrency or config_manager.get_nested("fetcher.concurrency", 10))
        self.user_agent = user_agent or generate_default_user_agent()

        self.semaphore = asyncio.Semaphore(self.max_concurrency)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={'User-Agent': self.user_agent}
            )
            logger.debug("PageFetcher: Session initialized.")

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("PageFetcher: Session closed.")

    async def fetch(self, url: str) -> Optional[FetchedPage]:
        """
        Fetches one page.

        Returns:
            Optional[FetchedPage]: The markup and load time, or None when the
            page could not be retrieved as HTML with status 200.
        """
        if not UrlUtils.uses_https(url):
            logger.warning("%s is not using HTTPS, which can impact SEO.", url)

        await self.initialize()
        start_time = time.perf_counter()

        try:
            async with self.semaphore:
                async with self.session.get(url) as response:
                    if response.status != 200:
                        logger.error("Received status code %s for %s", response.status, url)
                        return None

                    content_type = response.headers.get("Content-Type", "").lower()
                    if content_type and "html" not in content_type:
                        logger.warning("Skipping non-HTML content for %s (%s)", url, content_type)
                        return None

                    text = await self._read_content(response, url)
                    status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Error fetching %s: %s", url, e)
            return None

        if text is None:
            return None

        load_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.info("Page %s loaded in %.0f ms", url, load_time_ms)

        return FetchedPage(
            url=url,
            text=text,
            load_time_ms=load_time_ms,
            status=status,
            content_type=content_type
        )

    async def _read_content(self, response, url: str) -> Optional[str]:
        """Helper to read response body text safely."""
        try:
            return await asyncio.wait_for(response.text(), timeout=self.read_timeout)
        except asyncio.TimeoutError:
            logger.warning("Timeout reading response body for %s", url)
            return None
        except UnicodeDecodeError:
            content_bytes = await response.read()
            return content_bytes.decode('utf-8', errors='replace')

    async def fetch_many(self, urls: List[str], show_progress: bool = False) -> List[Optional[FetchedPage]]:
        """
        Fetches independent pages concurrently. Results keep the input order.
        No links are followed.
        """
        await self.initialize()
        tasks = [self.fetch(url) for url in urls]
        return await tqdm_asyncio.gather(*tasks, desc="Fetching", unit="page", disable=not show_progress)


def fetch_page_content(url: str, timeout: Optional[float] = None) -> Optional[FetchedPage]:
    """Synchronous entry point: fetches a single page on a fresh event loop."""

    async def _run() -> Optional[FetchedPage]:
        async with PageFetcher(timeout=timeout) as fetcher:
            return await fetcher.fetch(url)

    return asyncio.run(_run())
