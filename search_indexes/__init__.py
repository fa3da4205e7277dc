"""Atlas Search / Vector Search index sync: specs, JSON definitions, and reconciliation."""
from .specs import IndexSpec, default_specs, filter_specs, parse_only
from .definitions import IndexDefinitionError, load_definition
from .reconcile import (
    ensure_index,
    list_existing_indexes,
    reconcile,
    show_index_definitions,
)
