# API Utilities - data access helpers
from inventory.api.utils.db_helpers import (
    list_all,
    get_by_id,
    validate_fk,
    validate_references,
    present_fields,
    parse_fields,
    create_entity,
    delete_by_id,
)
from inventory.api.utils.updates import update_entity, update_by_id

__all__ = [
    # db_helpers
    "list_all",
    "get_by_id",
    "validate_fk",
    "validate_references",
    "present_fields",
    "parse_fields",
    "create_entity",
    "delete_by_id",
    # updates
    "update_entity",
    "update_by_id",
]
