"""Product record and CSV column layout"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List

# Record key -> CSV header label, in output order
COLUMNS: "OrderedDict[str, str]" = OrderedDict([
    ('title', 'Title'),
    ('price', 'Price'),
    ('imageUrl', 'ImageURL'),
    ('url', 'URL'),
    ('time', 'Time'),
])

# Keys a field table must produce ('time' comes from the clock)
RECORD_KEYS = ('title', 'price', 'imageUrl', 'url')


@dataclass(frozen=True)
class ProductRecord:
    """One scraped product detail page"""
    title: str
    price: str
    image_url: str  # absolute, resolved against the detail page URL
    url: str  # final URL of the detail page
    time: str  # scrape time, e.g. '03:41 pm'
    # values from additional FieldSpecs, keyed by field name
    extra: Dict[str, str] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, str]:
        """Record keyed by column key, extra fields included"""
        data = dict(self.extra)
        data.update({
            'title': self.title,
            'price': self.price,
            'imageUrl': self.image_url,
            'url': self.url,
            'time': self.time,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "ProductRecord":
        known = set(RECORD_KEYS) | {'time'}
        return cls(
            title=data['title'],
            price=data['price'],
            image_url=data['imageUrl'],
            url=data['url'],
            time=data['time'],
            extra={k: v for k, v in data.items() if k not in known},
        )


ScrapeResult = List[ProductRecord]
