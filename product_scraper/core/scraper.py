"""
Product Scraper - Main orchestration class
Listing page -> product links -> concurrent detail fetches -> records -> CSV
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from ..config import ScraperConfig
from .clock import clock
from .csv_writer import ensure_directory, generate_csv, write_csv
from .document import Document
from .errors import intercept
from .extractor import discover_links, extract_record
from .html_fetcher import HTMLFetcher
from .models import ProductRecord

logger = logging.getLogger(__name__)


class ProductScraper:
    """
    Scrapes a product listing into a dated CSV file

    Flow:
    1. Fetch the listing page (network failures become "Cannot connect with <url>")
    2. Ensure the data folder exists
    3. Collect product links
    4. Fetch every detail page concurrently, all-or-nothing
    5. Extract one record per page
    6. Write <data_folder>/<YYYY-MM-DD>.csv
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        fetcher: Optional[HTMLFetcher] = None
    ):
        """
        Initialize Product Scraper

        Args:
            config: Pipeline configuration (defaults to ScraperConfig())
            fetcher: HTML fetcher (built from the config if None)
        """
        self.config = config or ScraperConfig()
        self.fetcher = fetcher or HTMLFetcher(
            timeout=self.config.timeout,
            max_retries=self.config.max_retries
        )
        self._executors: List[ThreadPoolExecutor] = []

    async def fetch_listing(self) -> Document:
        """Fetch the listing page, rewriting connectivity failures"""
        target = self.config.target_url
        with intercept('RequestError', f"Cannot connect with {target}"):
            return await self.fetcher.fetch_async(target)

    async def fetch_all(self, urls: List[str]) -> List[Document]:
        """
        Fetch all URLs concurrently

        Results keep the input order. The first failure propagates; pending
        fetches are cancelled and nothing is returned.
        """
        if not urls:
            return []

        logger.info(f" Fetching {len(urls)} product pages...")

        executor = ThreadPoolExecutor(max_workers=len(urls), thread_name_prefix='fetch')
        # close() joins these before the shared session goes away
        self._executors.append(executor)
        tasks = [
            asyncio.ensure_future(self.fetcher.fetch_async(url, executor))
            for url in urls
        ]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def extract_all(self, documents: List[Document]) -> List[ProductRecord]:
        now = clock(self.config.time_format)
        return [extract_record(doc, self.config.fields, now) for doc in documents]

    async def scrape(self) -> List[ProductRecord]:
        """Run the pipeline up to (not including) the CSV write"""
        listing = await self.fetch_listing()
        ensure_directory(self.config.data_folder)

        links = discover_links(listing, self.config.products_selector)
        documents = await self.fetch_all(links)

        records = self.extract_all(documents)
        logger.info(f" Extracted {len(records)} products")
        return records

    def save(self, records: List[ProductRecord]) -> Path:
        """Serialize records and write the dated CSV file"""
        csv_text = generate_csv(records, self.config.columns, header=True, quote_empty=True)
        return write_csv(self.config.data_folder, csv_text)

    async def run(self) -> Path:
        """Scrape and write; returns the CSV path"""
        records = await self.scrape()
        return self.save(records)

    def close(self) -> None:
        """Clean up resources, waiting for fetches still running"""
        for executor in self._executors:
            executor.shutdown(wait=True)
        self._executors.clear()
        self.fetcher.close()
        logger.debug(" Product Scraper closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# Convenience function for simple usage
def scrape(config: Optional[ScraperConfig] = None) -> Path:
    """
    Run the whole pipeline once

    Args:
        config: Pipeline configuration

    Returns:
        Path of the written CSV file
    """
    with ProductScraper(config) as scraper:
        return asyncio.run(scraper.run())
