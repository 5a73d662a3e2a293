"""
Helpers shared by the extractors: building the URN lookup index from the
'included' array and resolving references through it.
"""
import logging
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from pydantic import ValidationError

from models.entity_models import ApiEntity, GenericEntity, parse_entity
from models.main_models import PagingInfo

EntityT = TypeVar("EntityT", bound=ApiEntity)

def build_lookup_index(included: Iterable[Any]) -> Dict[Optional[str], ApiEntity]:
    """
    Builds a mapping from entity URN to entity.

    Entities are inserted in source order, so when two entities share a URN
    the later one wins. Items that are not JSON objects are not entities and
    are skipped.
    """
    index: Dict[Optional[str], ApiEntity] = {}
    for raw in included:
        if not isinstance(raw, dict):
            continue
        entity = parse_entity(raw)
        index[entity.entity_urn] = entity
    return index

def extract_field(data: Any, field_path: str) -> Any:
    """
    Extracts the value from a nested dictionary using a dot-separated path.

    For example, given data = {"actor": {"name": {"text": "Acme"}}} and
    field_path = "actor.name.text", it returns "Acme". Any missing or
    non-dictionary hop yields None.
    """
    keys = field_path.split(".")
    value = data
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
        if value is None:
            return None
    return value

def resolve(
    index: Dict[Optional[str], ApiEntity],
    urn: Any,
    entity_type: Type[EntityT] = ApiEntity,
) -> Optional[EntityT]:
    """
    Looks up a URN in the index.

    Returns None when the reference is not a string, is not in the index,
    or resolves to an entity of a different variant.
    """
    if not isinstance(urn, str) or not urn:
        return None
    entity = index.get(urn)
    if not isinstance(entity, entity_type):
        return None
    return entity

def resolve_field(index: Dict[Optional[str], ApiEntity], urn: Any, field: str) -> Any:
    """
    Resolves a URN and reads one raw field from the result.

    Used for secondary entities (industries, following info, topics,
    social details) that have no dedicated model.
    """
    entity = resolve(index, urn, GenericEntity)
    if entity is None:
        return None
    return entity.get(field)

def resolve_chain(index: Dict[Optional[str], ApiEntity], urn: Any, *reference_fields: str) -> Any:
    """
    Follows reference fields hop by hop, starting from a URN.

    Each field names a reference on the current entity; the final entity is
    returned. The chain stops with None on the first missing hop.
    """
    entity = resolve(index, urn)
    for field in reference_fields:
        if entity is None:
            return None
        if isinstance(entity, GenericEntity):
            next_urn = entity.get(field)
        else:
            next_urn = getattr(entity, _attribute_for(entity, field), None)
        entity = resolve(index, next_urn)
    return entity

def _attribute_for(entity: ApiEntity, alias: str) -> str:
    for name, field_info in type(entity).model_fields.items():
        if field_info.alias == alias or name == alias:
            return name
    return alias

def text_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default

def build_paging(paging: Any, paging_cls: Type[PagingInfo] = PagingInfo, **extra: Any) -> Optional[PagingInfo]:
    """
    Copies the start/count/total paging block from a response envelope.
    Returns None when the block is missing or malformed.
    """
    if not isinstance(paging, dict):
        return None
    try:
        return paging_cls(
            start=paging.get("start"),
            count=paging.get("count"),
            total=paging.get("total"),
            **extra,
        )
    except ValidationError as e:
        logging.error("Invalid paging block in response: %s", e)
        return None
