"""Store wiring for the CLI and the web app."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .db.engine import get_db_path, init_db
from .db.repositories import KeyValueRepository
from .stores.nutrition import NutritionStore
from .stores.workouts import WorkoutStore

logger = logging.getLogger(__name__)


@dataclass
class LogStores:
    """The two stores, built once and handed to consumers."""

    workouts: WorkoutStore
    nutrition: NutritionStore


async def open_stores(db_path: Path | None = None) -> LogStores:
    """Create both stores over one database and load their contents."""
    resolved_path = db_path or get_db_path()
    await init_db(resolved_path)

    repository = KeyValueRepository(resolved_path)
    stores = LogStores(
        workouts=WorkoutStore.for_repository(repository),
        nutrition=NutritionStore.for_repository(repository),
    )
    await stores.workouts.load()
    await stores.nutrition.load()
    logger.info("Opened carve-log stores at %s", resolved_path)
    return stores
