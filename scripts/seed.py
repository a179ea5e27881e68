#!/usr/bin/env python3
"""
Seed script to fill the store with demo checklist entities.

Creates entities spread across the catalog projects and checks a random
share of their items, so progress bars have something to show.

Usage:
    python -m scripts.seed [--count 12] [--clear] [--check-ratio 0.4]

Options:
    --count N          Number of entities to create (default: 12)
    --clear            Remove all stored entities before seeding
    --check-ratio R    Probability that each item starts checked (default: 0.4)
"""

import argparse
import asyncio
import random
import time

from checklist.catalog import PROJECTS, get_project
from checklist.config import get_settings
from checklist.database import async_session_maker, init_db
from checklist.schemas import Category, Entity
from checklist.services.lifecycle import create_entity
from checklist.services.progress import category_progress, overall_progress
from checklist.services.store import ChecklistStore

FEATURES = [
    "Login Flow",
    "Checkout",
    "Search Page",
    "Newsletter Signup",
    "Account Settings",
    "Landing Page",
    "Cookie Banner",
    "Contact Form",
]


def generate_entities(count: int, check_ratio: float) -> list[Entity]:
    """Create `count` entities cycling through the catalog projects."""
    settings = get_settings()
    entities = []

    for i in range(count):
        project = PROJECTS[i % len(PROJECTS)]
        entity = create_entity(
            f"{random.choice(FEATURES)} #{i + 1:02d}",
            project.id,
            kind=settings.entity_kind,
            require_project=settings.require_project,
        )
        for item in entity.categories.all_items():
            item.checked = random.random() < check_ratio
        entities.append(entity)

    return entities


def print_stats(entities: list[Entity]) -> None:
    """Print per-entity progress."""
    print("\n=== Seeded Entities ===")
    for entity in entities:
        project = get_project(entity.project_id)
        overall = overall_progress(entity)
        per_category = "  ".join(
            f"{category.value}={category_progress(entity.categories.for_category(category)).percentage}%"
            for category in Category
        )
        print(f"{entity.name:<28} {project.name if project else '-':<20} {overall.text:<20} {per_category}")


async def main():
    parser = argparse.ArgumentParser(description="Seed the store with demo checklist entities")
    parser.add_argument("--count", type=int, default=12, help="Number of entities to create")
    parser.add_argument("--clear", action="store_true", help="Clear existing entities first")
    parser.add_argument("--check-ratio", type=float, default=0.4, help="Share of items checked")

    args = parser.parse_args()
    settings = get_settings()

    print("=== Checklist Seed Script ===")

    await init_db()
    store = ChecklistStore(async_session_maker, settings.store_key)
    await store.load()

    if args.clear:
        print(f"Clearing {len(store.entities)} existing entities...")
        await store.clear()

    start_time = time.time()
    entities = generate_entities(args.count, args.check_ratio)
    for entity in entities:
        store.upsert(entity)

    if not await store.save():
        print("Saving failed, nothing was written.")
        return

    print(f"Created {len(entities)} entities in {time.time() - start_time:.2f}s")
    print_stats(entities)
    print(f"\nStore now holds {len(store.entities)} entities in slot '{store.key}'")


if __name__ == "__main__":
    asyncio.run(main())
