"""Create or update Atlas Search / Vector Search indexes to match the JSON definitions."""
import json
import logging
from typing import Any, Iterable, Optional

from .definitions import load_definition
from .specs import IndexSpec

logger = logging.getLogger(__name__)

CREATE = "create"
UPDATE = "update"
RECREATE = "recreate"


def list_existing_indexes(db, collection_name: str) -> list[str]:
    """
    Return the names of the search indexes on a collection.
    If listing fails (e.g. older server without $listSearchIndexes), assume none exist.
    """
    try:
        return [idx["name"] for idx in db[collection_name].list_search_indexes()]
    except Exception as e:
        logger.error(f"Failed to list search indexes for {collection_name}: {e}")
        return []


def show_index_definitions(db, collection_name: str) -> int:
    """Print every search index on the collection with its full definition. Returns how many were found."""
    indexes = list(db[collection_name].list_search_indexes())
    if not indexes:
        print(f"No indexes found for collection {collection_name}")
        return 0
    print(f"\nIndex definitions for '{collection_name}':\n")
    for idx in indexes:
        print(f"Index name: {idx.get('name')}")
        print(json.dumps(idx, indent=2, default=str))
        print("-" * 30 + "\n")
    return len(indexes)


def _create_model(spec: IndexSpec, document: dict[str, Any]) -> dict[str, Any]:
    """Shape a definition file into a search index model; the IndexSpec name always wins."""
    if "definition" not in document:
        return {"name": spec.name, "definition": document}
    model = dict(document)
    file_name = model.get("name")
    if file_name is not None and file_name != spec.name:
        logger.warning(
            f"{spec.definition_file} names index '{file_name}' but it is synced as '{spec.name}'; "
            f"using '{spec.name}'"
        )
    model["name"] = spec.name
    return model


def _update_definition(document: dict[str, Any]) -> dict[str, Any]:
    return document.get("definition", document)


def create_index(db, spec: IndexSpec, document: dict[str, Any]) -> None:
    db[spec.collection].create_search_index(_create_model(spec, document))
    print(f"Created index {spec.name} on collection {spec.collection}")


def update_index(db, spec: IndexSpec, document: dict[str, Any]) -> None:
    db[spec.collection].update_search_index(spec.name, _update_definition(document))
    print(f"Updated index {spec.name} on collection {spec.collection}")


def drop_index(db, spec: IndexSpec) -> None:
    db[spec.collection].drop_search_index(spec.name)
    print(f"Dropped index {spec.name} on collection {spec.collection}")


def ensure_index(
    db,
    spec: IndexSpec,
    *,
    dry_run: bool = False,
    force_recreate: bool = False,
    base_dir: Optional[str] = None,
) -> str:
    """
    Bring one index in line with its definition file: create it if absent, update it if present
    (or drop and recreate it with force_recreate). Atlas builds indexes asynchronously; this does
    not wait for the build. In dry-run mode nothing is sent and the intended action is printed.
    Returns the action taken (or that would be taken).
    """
    existing = list_existing_indexes(db, spec.collection)
    document = load_definition(spec.definition_file, base_dir)

    if spec.name not in existing:
        action = CREATE
    elif force_recreate:
        action = RECREATE
    else:
        action = UPDATE
    logger.debug(f"{spec.collection}.{spec.name}: existing={existing} action={action}")

    if dry_run:
        print(f"[dry-run] would {action} index {spec.name} on collection {spec.collection}")
        return action

    if action == CREATE:
        create_index(db, spec, document)
    elif action == UPDATE:
        update_index(db, spec, document)
    else:
        drop_index(db, spec)
        create_index(db, spec, document)
    return action


def reconcile(
    db,
    specs: Iterable[IndexSpec],
    *,
    dry_run: bool = False,
    force_recreate: bool = False,
    base_dir: Optional[str] = None,
) -> list[tuple[IndexSpec, str]]:
    """Ensure each spec in order, one at a time. Errors from any spec stop the run."""
    results = []
    for spec in specs:
        action = ensure_index(db, spec, dry_run=dry_run, force_recreate=force_recreate, base_dir=base_dir)
        results.append((spec, action))
    return results
