"""
Field Extractor
Declarative selector table applied to product detail pages, plus link
discovery on the listing page
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .clock import record_time
from .document import Document
from .errors import ExtractionError
from .models import ProductRecord

logger = logging.getLogger(__name__)

PRICE_PREFIX = re.compile(r'\$\d+ ')

PRODUCTS_SELECTOR = '.products a'


def strip_price_prefix(text: str) -> str:
    """'$20 Men's Shirt' -> "Men's Shirt" """
    return PRICE_PREFIX.sub('', text)


@dataclass
class FieldSpec:
    """How to read one output field from a document"""
    name: str  # column key, e.g. 'imageUrl'
    selector: Optional[str] = None  # None reads the document itself
    attribute: Optional[str] = None  # None reads the element text
    transformer: Optional[Callable[[str], str]] = None
    description: str = ""

    def read(self, document: Document) -> str:
        """
        Extract this field's value from a document

        Raises:
            ExtractionError: selector matched nothing, or attribute is absent
        """
        if self.selector is None:
            value = getattr(document, self.attribute or 'url', None)
            if value is None:
                raise ExtractionError(
                    f"Field '{self.name}': document has no '{self.attribute}' ({document.url})"
                )
        else:
            element = document.query_one(self.selector)
            if element is None:
                raise ExtractionError(
                    f"Field '{self.name}': no element matches '{self.selector}' on {document.url}"
                )

            if self.attribute is None:
                value = document.text(element)
            else:
                value = document.attribute(element, self.attribute)
                if value is None:
                    raise ExtractionError(
                        f"Field '{self.name}': '{self.selector}' has no '{self.attribute}' "
                        f"attribute on {document.url}"
                    )

        if self.transformer:
            value = self.transformer(value)
        return value


PRODUCT_FIELDS: List[FieldSpec] = [
    FieldSpec('title', '.shirt-details h1', transformer=strip_price_prefix,
              description="Product name without the leading price"),
    FieldSpec('price', '.price'),
    FieldSpec('imageUrl', '.shirt-picture img', attribute='src'),
    FieldSpec('url', attribute='url', description="Final URL of the detail page"),
]


def extract_fields(document: Document, fields: List[FieldSpec]) -> Dict[str, str]:
    """Apply every FieldSpec to a document, each independently"""
    return {field.name: field.read(document) for field in fields}


def extract_record(
    document: Document,
    fields: Optional[List[FieldSpec]] = None,
    now: Optional[Callable[[], str]] = None
) -> ProductRecord:
    """
    Build a ProductRecord from a detail page

    Args:
        document: Parsed detail page
        fields: Field table (defaults to PRODUCT_FIELDS)
        now: Callable returning the scrape time string

    Returns:
        ProductRecord
    """
    values = extract_fields(document, fields or PRODUCT_FIELDS)
    values['time'] = (now or record_time)()

    logger.debug(f" Extracted: {values['title']!r} from {document.url}")
    return ProductRecord.from_dict(values)


def discover_links(document: Document, selector: str = PRODUCTS_SELECTOR) -> List[str]:
    """
    href of every anchor under the products container, in document order

    No deduplication or validation; an anchor without href yields ''.
    """
    links = []
    for anchor in document.query(selector):
        href = document.attribute(anchor, 'href')
        links.append(href if href is not None else '')

    logger.info(f" Found {len(links)} product links on {document.url}")
    return links
