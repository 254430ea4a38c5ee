"""
Custom Fields Example
Swap the selector table and columns, and keep the records in memory
"""

import asyncio
from collections import OrderedDict

from product_scraper import ProductScraper, ScraperConfig
from product_scraper.core import FieldSpec, PRODUCT_FIELDS, generate_csv


def main():
    # Same table, but keep only the number from the price text
    fields = [f for f in PRODUCT_FIELDS if f.name != 'price']
    fields.append(FieldSpec('price', '.price', transformer=lambda text: text.lstrip('$')))

    config = ScraperConfig(
        target_url='http://shirts4mike.com/shirts.php',
        fields=fields,
        columns=OrderedDict([('title', 'Name'), ('price', 'Cost'), ('url', 'Link')]),
        timeout=10,
        max_retries=2
    )

    with ProductScraper(config) as scraper:
        records = asyncio.run(scraper.scrape())

    print(f"\nExtracted {len(records)} products")
    for i, record in enumerate(records[:3], 1):
        print(f"\nProduct {i}:")
        print(f"  title: {record.title}")
        print(f"  price: {record.price}")

    # CSV text without touching the disk
    print()
    print(generate_csv(records, config.columns))


if __name__ == '__main__':
    main()
