#!/usr/bin/env python3
"""
Generate the dataset list consumed by the explorer front end.

Writes a JSON array like [{"name": "pge-2024", "average": ""}, ...] with one
entry per CSV file in the data directory, sorted by name.

Usage:
    python -m price_explorer.utils.generate_file_entities --data-dir data --output file-entities.json
    python -m price_explorer.utils.generate_file_entities --with-average
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config import DatasetStore, app_config
from ..exceptions import PriceExplorerError
from ..repositories import DatasetRepository
from .aggregation import mean, round_price

logger = logging.getLogger(__name__)


def build_file_entities(repository: DatasetRepository, with_average: bool = False) -> List[dict]:
    """
    Build one entry per dataset.

    Datasets without valid prices keep an empty average when
    with_average is set.
    """
    entities = []
    for name in repository.find_all():
        average = ""
        if with_average:
            try:
                prices = [sample.price for sample in repository.find_samples(name)]
                average = round_price(mean(prices))
            except PriceExplorerError as e:
                logger.warning(f"⚠️ No average for '{name}': {e}")
        entities.append({"name": name, "average": average})
    return entities


def write_file_entities(entities: List[dict], output_path: str) -> None:
    """Write the entity list as indented JSON."""
    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(entities, handle, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    parser = argparse.ArgumentParser(
        description='Generate the file-entities JSON for the price datasets')

    parser.add_argument(
        '--data-dir',
        default=app_config.data_dir,
        help='Directory holding the CSV datasets (default: configured data directory)'
    )

    parser.add_argument(
        '--output', '-o',
        default='file-entities.json',
        help='Output JSON file (default: file-entities.json)'
    )

    parser.add_argument(
        '--with-average',
        action='store_true',
        help='Fill the average field with the mean price of each dataset'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=app_config.logging.format
    )

    repository = DatasetRepository(DatasetStore(args.data_dir))
    entities = build_file_entities(repository, with_average=args.with_average)

    try:
        write_file_entities(entities, args.output)
    except OSError as e:
        logger.error(f"❌ Could not write {args.output}: {e}")
        return 1

    logger.info(f"✅ Generated {args.output} with {len(entities)} CSV files")
    for entity in entities:
        logger.info(f"  - {entity['name']}.csv")
    return 0


if __name__ == "__main__":
    sys.exit(main())
