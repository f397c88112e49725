"""
Declarative attribute schema for resource and data source models.

Models are plain dataclasses whose fields are declared with ``attribute()``.
Every field defaults to ``None`` ("unset"); the attribute metadata tells the
adapters how the field is planned, sent and read back.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .models import InputError


class AttrKind(Enum):
    """Value type of a schema attribute."""
    INT64 = "int64"
    STRING = "string"
    BOOL = "bool"
    STRING_LIST = "list(string)"
    INT64_LIST = "list(int64)"


@dataclass(frozen=True)
class Attribute:
    """Schema annotations for one model field."""
    kind: AttrKind
    name: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    default: Any = None
    wire_name: str | None = None
    create_only: bool = False
    description: str = ""

    @property
    def wire(self) -> str:
        """Field name used by the remote API."""
        return self.wire_name or self.name

    @property
    def computed_only(self) -> bool:
        """True if the value is only ever set by the remote system."""
        return self.computed and not self.optional and not self.required

    @property
    def clearable(self) -> bool:
        """True if leaving the attribute unset must clear it remotely."""
        return self.optional and not self.computed


def attribute(
    kind: AttrKind,
    *,
    required: bool = False,
    optional: bool = False,
    computed: bool = False,
    sensitive: bool = False,
    default: Any = None,
    wire_name: str | None = None,
    create_only: bool = False,
    description: str = "",
):
    """
    Declare a model field with schema annotations.

    An attribute with a static default is optional and computed, so an unset
    value is filled in during planning instead of being cleared.
    """
    if default is not None:
        optional = True
        computed = True

    meta = Attribute(
        kind=kind,
        required=required,
        optional=optional,
        computed=computed,
        sensitive=sensitive,
        default=default,
        wire_name=wire_name,
        create_only=create_only,
        description=description,
    )
    return field(default=None, metadata={"attribute": meta})


def schema_of(model_cls) -> dict[str, Attribute]:
    """Return the attributes of a model class keyed by field name."""
    schema = {}
    for f in dataclasses.fields(model_cls):
        meta = f.metadata.get("attribute")
        if meta is None:
            continue
        schema[f.name] = dataclasses.replace(meta, name=f.name)
    return schema


def _check_value(attr: Attribute, value: Any) -> Any:
    """Validate a declared value against its attribute kind."""
    kind = attr.kind

    if kind == AttrKind.BOOL:
        ok = isinstance(value, bool)
    elif kind == AttrKind.INT64:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif kind == AttrKind.STRING:
        ok = isinstance(value, str)
    elif kind == AttrKind.STRING_LIST:
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
    else:
        ok = isinstance(value, list) and all(
            isinstance(v, int) and not isinstance(v, bool) for v in value
        )

    if not ok:
        raise InputError(
            f"Attribute '{attr.name}' must be of type {kind.value}, "
            f"got {type(value).__name__}"
        )

    if isinstance(value, list):
        return list(value)
    return value


def plan_model(model_cls, config: dict[str, Any], prior=None):
    """
    Build a planned model from a declared configuration.

    Args:
        model_cls: Resource model dataclass
        config: Declared attribute values (unset attributes may be absent
                or None)
        prior: Model from the current state, if the resource exists

    Returns:
        Model instance with defaults applied and computed values carried
        over from ``prior``

    Raises:
        InputError: If the configuration does not match the schema
    """
    schema = schema_of(model_cls)

    unknown = sorted(set(config) - set(schema))
    if unknown:
        raise InputError(f"Unsupported attribute(s): {', '.join(unknown)}")

    values = {}
    for name, attr in schema.items():
        value = config.get(name)

        if value is not None:
            if attr.computed_only:
                raise InputError(f"Attribute '{name}' is computed and cannot be set")
            values[name] = _check_value(attr, value)
        elif attr.required:
            raise InputError(f"Missing required attribute '{name}'")
        elif attr.default is not None:
            values[name] = attr.default
        elif attr.computed and prior is not None:
            values[name] = getattr(prior, name)

    return model_cls(**values)


def model_to_state(model) -> dict[str, Any]:
    """Convert a model into a state document."""
    return dataclasses.asdict(model)


def model_from_state(model_cls, state: dict[str, Any]):
    """Rebuild a model from a state document, ignoring unknown keys."""
    schema = schema_of(model_cls)
    return model_cls(**{k: v for k, v in state.items() if k in schema})


def describe_schema(model_cls) -> list[dict[str, Any]]:
    """Describe the attributes of a model for display."""
    rows = []
    for attr in schema_of(model_cls).values():
        rows.append({
            "name": attr.name,
            "type": attr.kind.value,
            "required": attr.required,
            "optional": attr.optional,
            "computed": attr.computed,
            "sensitive": attr.sensitive,
            "default": attr.default,
            "description": attr.description,
        })
    return rows
