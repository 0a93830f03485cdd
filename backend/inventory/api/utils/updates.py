"""
Update Helpers - functions for updating entities
"""
from typing import TypeVar, List, Type, Dict, Any, Optional
from pydantic import BaseModel, ValidationError as SchemaError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from inventory.api.utils.db_helpers import get_by_id, present_fields, validate_references
from inventory.core.errors import ValidationError

T = TypeVar('T')


def update_entity(
    db: Session,
    entity: T,
    update_data: Dict[str, Any],
    exclude_fields: List[str] = None,
    commit: bool = True
) -> T:
    """
    Apply a dict of field values to an entity.

    Args:
        db: Database session
        entity: Entity to update
        update_data: {field: value} to write
        exclude_fields: Fields to skip
        commit: Whether to commit right away

    Returns:
        The updated entity

    Usage:
        product = update_entity(db, product, {"price": Decimal("9.90")})
    """
    data = dict(update_data)

    if exclude_fields:
        data = {k: v for k, v in data.items() if k not in exclude_fields}

    for field, value in data.items():
        if hasattr(entity, field):
            setattr(entity, field, value)

    if commit:
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(entity)

    return entity


def update_by_id(
    db: Session,
    model: Type[T],
    entity_id: int,
    fields: Dict[str, Any],
    schema_cls: Optional[Type[BaseModel]] = None
) -> int:
    """
    Merge the submitted fields into an existing entity.

    Fields that are missing or empty keep their stored value. An unknown
    id is a no-op and nothing is validated; otherwise, when schema_cls is
    given, the remaining values are validated against it first.

    Returns:
        Number of updated rows (0 when the entity does not exist)

    Raises:
        ValidationError for malformed values or dangling references

    Usage:
        update_by_id(db, Product, product_id, {"name": "Tablet"}, ProductUpdate)
    """
    entity = get_by_id(db, model, entity_id)
    if entity is None:
        return 0

    data = present_fields(fields)

    if schema_cls is not None:
        try:
            data = schema_cls(**data).model_dump(exclude_unset=True)
        except SchemaError as e:
            raise ValidationError(f"Invalid {schema_cls.__name__} data: {e.error_count()} error(s)") from e

    validate_references(db, model, data)
    update_entity(db, entity, data)
    return 1
