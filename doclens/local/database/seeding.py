import json
import uuid
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Tuple

from doclens.local.database.catalog import (
    DEFAULT_COUNTRIES, DEFAULT_INDUSTRIES, DEFAULT_SETTINGS, FRAMEWORK_KEYWORDS,
)
from doclens.local.database.migrations import migration_step

if TYPE_CHECKING:
    from .store import StoreDBManager

log = logging.getLogger(__name__)


def seed_countries(store: "StoreDBManager", countries: List[Tuple[str, str]] = DEFAULT_COUNTRIES) -> int:
    """Seeds the country list when the table is empty."""
    with migration_step("seed_countries"):
        if store.count("countries"):
            return 0
        log.info("Seeding default countries...")
        with store.transaction():
            store.execute_many("INSERT INTO countries (code, name, is_default) VALUES (?, ?, 1)", countries)
    return len(countries)


def seed_industries(store: "StoreDBManager", industries: List[Tuple[str, str, str]] = DEFAULT_INDUSTRIES) -> int:
    """Seeds the industry list when the table is empty."""
    with migration_step("seed_industries"):
        if store.count("industries"):
            return 0
        log.info("Seeding default industries...")
        with store.transaction():
            store.execute_many(
                "INSERT INTO industries (id, name, category, is_default) VALUES (?, ?, ?, 1)", industries
            )
    return len(industries)


def seed_settings(store: "StoreDBManager", settings: List[Tuple[str, str]] = DEFAULT_SETTINGS) -> int:
    """Seeds global settings when none exist."""
    with migration_step("seed_settings"):
        if store.count("settings"):
            return 0
        log.info("Seeding default settings...")
        with store.transaction():
            store.execute_many("INSERT INTO settings (key, value) VALUES (?, ?)", settings)
    return len(settings)


def builtin_list_id(framework_key: str) -> str:
    """Row id for a builtin list. Never used to detect what is already seeded."""
    return f"builtin-{framework_key}-{uuid.uuid4().hex[:12]}"


def seed_keyword_frameworks(store: "StoreDBManager", catalog: List[Dict[str, Any]] = FRAMEWORK_KEYWORDS) -> List[str]:
    """
    Inserts builtin keyword frameworks that are not yet in the store.

    Presence is decided per catalog entry by its stable framework key, so a
    catalog entry added in a later release is inserted on its own.

    :return: The framework keys inserted.
    """
    with migration_step("seed_keyword_frameworks"):
        rows = store.fetch_all(
            "SELECT DISTINCT framework FROM keyword_lists WHERE is_builtin = 1 AND framework IS NOT NULL"
        )
        seeded = {row["framework"] for row in rows}
        missing = [framework for framework in catalog if framework["id"] not in seeded]
        if not missing:
            log.info(f"Framework keyword lists already seeded ({len(seeded)} found)")
            return []

        with_category = store.table_has_column("keyword_lists", "category")
        columns = "id, name, description, framework, list_type, keywords, is_builtin"
        placeholders = "?, ?, ?, ?, ?, ?, 1"
        if with_category:
            columns += ", category"
            placeholders += ", ?"

        log.info(f"Seeding {len(missing)} framework keyword list(s)...")
        with store.transaction():
            for framework in missing:
                params = [
                    builtin_list_id(framework["id"]),
                    framework["name"],
                    framework.get("description"),
                    framework["id"],
                    framework["list_type"],
                    json.dumps(framework["keywords"]),
                ]
                if with_category:
                    params.append(framework.get("category"))
                store.run(f"INSERT INTO keyword_lists ({columns}) VALUES ({placeholders})", tuple(params))
                log.info(f"  Seeded: {framework['name']}")

    return [framework["id"] for framework in missing]
