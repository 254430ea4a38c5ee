"""Core scraping modules"""

from .scraper import ProductScraper
from .html_fetcher import HTMLFetcher
from .document import Document
from .extractor import FieldSpec, PRODUCT_FIELDS, discover_links, extract_record
from .csv_writer import ensure_directory, ensure_directories, generate_csv, write_csv
from .errors import ScraperError, FetchError, RequestError, StatusCodeError, ExtractionError
from .reporter import ErrorReporter, setup_logging

__all__ = [
    "ProductScraper",
    "HTMLFetcher",
    "Document",
    "FieldSpec",
    "PRODUCT_FIELDS",
    "discover_links",
    "extract_record",
    "ensure_directory",
    "ensure_directories",
    "generate_csv",
    "write_csv",
    "ScraperError",
    "FetchError",
    "RequestError",
    "StatusCodeError",
    "ExtractionError",
    "ErrorReporter",
    "setup_logging",
]
