"""Desired search/vector index specs."""
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class IndexSpec:
    collection: str
    name: str  # index name in Atlas Search
    definition_file: str  # JSON file in config/indexes/


def default_specs() -> list[IndexSpec]:
    """Return the indexes to create / update in Atlas, in processing order."""
    return [
        IndexSpec("products", "vector", "products.vector.json"),
        IndexSpec("products", "hybrid", "products.hybrid.json"),
        IndexSpec("docs", "vector", "docs.vector.json"),
        IndexSpec("tickets", "hybrid", "tickets.hybrid.json"),
    ]


def parse_only(value: Optional[str]) -> Optional[list[str]]:
    """Split a comma-separated --only value into collection names. None means no filter; a blank value matches nothing."""
    if value is None:
        return None
    return [v.strip() for v in value.split(",") if v.strip()]


def filter_specs(specs: Iterable[IndexSpec], only: Optional[Iterable[str]] = None) -> list[IndexSpec]:
    """Keep the specs whose collection is in `only` (all of them when `only` is None), preserving order."""
    if only is None:
        return list(specs)
    wanted = set(only)
    return [s for s in specs if s.collection in wanted]
