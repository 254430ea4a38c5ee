"""
Product Scraper
Scrapes a product listing and its detail pages into a dated CSV file
"""

__version__ = "1.0.0"

# core first: config depends on core submodules
from .core.scraper import ProductScraper, scrape
from .config import ScraperConfig

__all__ = ["ProductScraper", "ScraperConfig", "scrape"]
