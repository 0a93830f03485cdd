"""
Database Helpers - data access operations shared by every entity kind
Each function takes the request's Session explicitly
"""
from typing import Type, TypeVar, Optional, Any, List, Dict
from pydantic import BaseModel, ValidationError as SchemaError
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from inventory.core.errors import ValidationError

T = TypeVar('T')

def _many_to_one(model: Type[T]) -> list:
    """Many-to-one relationships declared on the model"""
    return [rel for rel in inspect(model).relationships if rel.direction.name == "MANYTOONE"]

def _with_relations(query, model: Type[T]):
    for rel in _many_to_one(model):
        query = query.options(joinedload(getattr(model, rel.key)))
    return query

def list_all(db: Session, model: Type[T], with_relations: bool = False) -> List[T]:
    """
    Return every row of the model, ordered by id.

    Args:
        db: Database session
        model: SQLAlchemy model class
        with_relations: Eager-load the many-to-one relationships

    Usage:
        categories = list_all(db, Category)
        products = list_all(db, Product, with_relations=True)
    """
    query = db.query(model)
    if with_relations:
        query = _with_relations(query, model)
    return query.order_by(model.id).all()

def get_by_id(
    db: Session,
    model: Type[T],
    entity_id: int,
    with_relations: bool = False
) -> Optional[T]:
    """
    Fetch an entity by ID.

    Args:
        db: Database session
        model: SQLAlchemy model class
        entity_id: Entity ID
        with_relations: Eager-load the many-to-one relationships

    Returns:
        The entity, or None when it does not exist

    Usage:
        product = get_by_id(db, Product, product_id, with_relations=True)
    """
    query = db.query(model).filter(model.id == entity_id)
    if with_relations:
        query = _with_relations(query, model)
    return query.first()

def validate_fk(
    db: Session,
    model: Type[T],
    fk_id: int,
    field_name: str = None
) -> T:
    """
    Check that a foreign key points at an existing row.

    Raises:
        ValidationError if the referenced row does not exist

    Usage:
        category = validate_fk(db, Category, category_id, "category_id")
    """
    entity = db.query(model).filter(model.id == fk_id).first()

    if entity is None:
        name = field_name or model.__name__
        raise ValidationError(f"{name} references a missing {model.__name__} ({fk_id})")

    return entity

def validate_references(db: Session, model: Type[T], data: Dict[str, Any]) -> None:
    """Validate every many-to-one foreign key present in data"""
    for rel in _many_to_one(model):
        for column in rel.local_columns:
            value = data.get(column.key)
            if value is not None:
                validate_fk(db, rel.mapper.class_, value, column.key)

def present_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Drop fields that were not submitted or were submitted empty"""
    return {k: v for k, v in fields.items() if v is not None and v != ""}

def parse_fields(schema_cls: Type[BaseModel], fields: Dict[str, Any]) -> BaseModel:
    """
    Validate raw fields against a pydantic schema.

    Raises:
        ValidationError listing the missing required fields, or without a
        list when every field was present but some value was malformed
    """
    data = present_fields(fields)
    missing = [
        name for name, field in schema_cls.model_fields.items()
        if field.is_required() and name not in data
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", missing=missing)

    try:
        return schema_cls(**data)
    except SchemaError as e:
        raise ValidationError(f"Invalid {schema_cls.__name__} data: {e.error_count()} error(s)") from e

def create_entity(
    db: Session,
    model: Type[T],
    schema_cls: Type[BaseModel],
    fields: Dict[str, Any]
) -> T:
    """
    Validate and insert a new entity.

    Args:
        db: Database session
        model: SQLAlchemy model class
        schema_cls: Pydantic creation schema for the model
        fields: Raw field values (empty strings count as missing)

    Returns:
        The persisted entity, with its assigned id

    Raises:
        ValidationError for missing or malformed fields and dangling references

    Usage:
        category = create_entity(db, Category, CategoryCreate, {"name": "Books"})
    """
    payload = parse_fields(schema_cls, fields)
    data = payload.model_dump()
    validate_references(db, model, data)

    entity = model(**data)
    db.add(entity)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(entity)
    return entity

def delete_by_id(db: Session, model: Type[T], entity_id: int) -> int:
    """
    Delete an entity by ID.

    Returns:
        Number of deleted rows (0 when the entity does not exist)

    Usage:
        delete_by_id(db, Product, product_id)
    """
    try:
        deleted = db.query(model).filter(model.id == entity_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return deleted
