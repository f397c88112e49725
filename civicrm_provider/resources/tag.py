"""Tag resource."""

import dataclasses
from dataclasses import dataclass

from civicrm_provider.client.coercion import get_string
from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class Tag:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    name: str | None = attribute(AttrKind.STRING, required=True)
    label: str | None = attribute(
        AttrKind.STRING, optional=True, computed=True, description="Defaults to the name"
    )
    description: str | None = attribute(AttrKind.STRING, optional=True)
    parent_id: int | None = attribute(AttrKind.INT64, optional=True)
    is_selectable: bool | None = attribute(AttrKind.BOOL, default=True)
    is_reserved: bool | None = attribute(AttrKind.BOOL, default=False)
    is_tagset: bool | None = attribute(AttrKind.BOOL, default=False)
    used_for: list[str] | None = attribute(
        AttrKind.STRING_LIST, optional=True, description="Entity tables the tag applies to"
    )
    color: str | None = attribute(AttrKind.STRING, optional=True)


class TagResource(ResourceAdapter):
    """Manages tags."""

    type_name = "civicrm_tag"
    entity = "Tag"
    label = "tag"
    model_cls = Tag

    def apply_response(self, model, record):
        result = super().apply_response(model, record)

        label, ok = get_string(record, "label")
        if not ok or not label:
            result = dataclasses.replace(result, label=result.name)
        return result
