"""
Annotation-driven validation helpers.

Options classes are plain dataclasses whose fields carry pydantic ``Annotated``
constraints. These helpers run those constraints against a live instance and
convert raw configuration values to a field's declared type.
"""

import dataclasses
from functools import lru_cache
from typing import Any, get_args, get_type_hints

from pydantic import TypeAdapter, ValidationError


@lru_cache(maxsize=None)
def _adapter_for(options_type: type) -> TypeAdapter:
    return TypeAdapter(options_type)


@lru_cache(maxsize=None)
def _field_types(options_type: type) -> dict[str, Any]:
    # Annotated metadata is stripped so conversion never triggers the constraints
    return get_type_hints(options_type)


def annotation_failures(instance: Any) -> list[str]:
    """
    Run the constraints declared on a dataclass instance's fields.

    Args:
        instance: A dataclass instance

    Returns:
        Failure messages in field order; empty when every constraint holds
    """
    options_type = type(instance)
    try:
        _adapter_for(options_type).validate_python(dataclasses.asdict(instance))
    except ValidationError as exc:
        return [error["msg"] for error in exc.errors()]
    return []


def _accepts_str(field_type: Any) -> bool:
    return field_type is str or str in get_args(field_type)


def convert_field_value(options_type: type, field_name: str, raw: Any) -> Any:
    """
    Convert a raw configuration value to a field's declared type.

    Configuration scalars are text, so numbers and booleans bound to a string
    field are kept as their string form. Values that cannot be converted are
    returned unchanged so that validation reports them later.
    """
    field_type = _field_types(options_type).get(field_name)
    if field_type is None:
        return raw
    if isinstance(raw, (bool, int, float)) and _accepts_str(field_type):
        return str(raw)
    try:
        return _adapter_for(field_type).validate_python(raw)
    except ValidationError:
        return raw
