#!/usr/bin/env python3
"""
Populate the shelter data directory with sample records.

Only files that do not exist yet are written; existing data is never touched.

Usage:
  python scripts/seed_data.py [--data-dir PATH]
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shelter.config.settings import get_settings
from shelter.infrastructure.seed.sample_data import seed_sample_data
from shelter.infrastructure.storage.registry import JsonShelterStores


async def run(data_dir: Path | None) -> int:
    settings = get_settings()
    if data_dir is not None:
        settings = settings.model_copy(update={"data_dir": data_dir})
    stores = JsonShelterStores.from_settings(settings)
    try:
        created = await seed_sample_data(stores)
    except Exception as exc:
        print(f"\n❌ Error seeding data: {exc}")
        import traceback

        traceback.print_exc()
        return 1

    if not created:
        print(f"ℹ️  All data files already exist in {stores.data_dir}, nothing to do")
        return 0
    for path in created:
        print(f"✅ Created {path}")
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the shelter JSON data files")
    parser.add_argument("--data-dir", type=Path, default=None, help="Override SHELTER_DATA_DIR")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    sys.exit(asyncio.run(run(args.data_dir)))
