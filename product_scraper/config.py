"""
Scraper configuration
"""

import os
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .core.extractor import PRODUCT_FIELDS, PRODUCTS_SELECTOR, FieldSpec
from .core.models import COLUMNS, RECORD_KEYS

DEFAULT_TARGET = 'http://shirts4mike.com/shirts.php'

ENV_PREFIX = 'PRODUCT_SCRAPER_'


@dataclass
class ScraperConfig:
    """Everything the pipeline needs, passed explicitly to ProductScraper"""
    target_url: str = DEFAULT_TARGET
    data_folder: str = './data'
    log_folder: str = './logs'
    products_selector: str = PRODUCTS_SELECTOR
    columns: Mapping[str, str] = field(default_factory=lambda: OrderedDict(COLUMNS))
    fields: List[FieldSpec] = field(default_factory=lambda: list(PRODUCT_FIELDS))
    time_format: Optional[str] = None  # None: "08:44 pm"
    timeout: float = 30
    max_retries: int = 0

    def __post_init__(self):
        names = [f.name for f in self.fields]

        missing = [key for key in RECORD_KEYS if key not in names]
        if missing:
            raise ValueError(f"fields must include {', '.join(missing)}")

        unknown = [key for key in self.columns if key not in names and key != 'time']
        if unknown:
            raise ValueError(f"columns name fields that are never extracted: {', '.join(unknown)}")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None, **overrides) -> "ScraperConfig":
        """
        Build a config from PRODUCT_SCRAPER_* environment variables

        Recognized: URL, DATA_DIR, LOG_DIR, TIMEOUT, RETRIES. Keyword
        overrides that are not None win over the environment.
        """
        environ = os.environ if environ is None else environ
        values = {}

        env_map = {
            'URL': ('target_url', str),
            'DATA_DIR': ('data_folder', str),
            'LOG_DIR': ('log_folder', str),
            'TIMEOUT': ('timeout', float),
            'RETRIES': ('max_retries', int),
        }
        for suffix, (attr, cast) in env_map.items():
            raw = environ.get(ENV_PREFIX + suffix)
            if raw:
                try:
                    values[attr] = cast(raw)
                except ValueError:
                    raise ValueError(f"Invalid {ENV_PREFIX + suffix}: {raw!r}")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
