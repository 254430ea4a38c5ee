"""
Basic Usage Example
Scrape the default listing into ./data/<today>.csv
"""

from product_scraper import scrape, ScraperConfig


def main():
    config = ScraperConfig(data_folder='./data')

    output_path = scrape(config)

    print(f"\nSaved to {output_path}")


if __name__ == '__main__':
    main()
