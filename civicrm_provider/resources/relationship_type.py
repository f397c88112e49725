"""Relationship type resource."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class RelationshipType:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    name_a_b: str | None = attribute(AttrKind.STRING, required=True, description="Name from A to B")
    label_a_b: str | None = attribute(AttrKind.STRING, required=True)
    name_b_a: str | None = attribute(AttrKind.STRING, required=True, description="Name from B to A")
    label_b_a: str | None = attribute(AttrKind.STRING, required=True)
    description: str | None = attribute(AttrKind.STRING, optional=True)
    contact_type_a: str | None = attribute(AttrKind.STRING, optional=True)
    contact_type_b: str | None = attribute(AttrKind.STRING, optional=True)
    contact_sub_type_a: str | None = attribute(AttrKind.STRING, optional=True)
    contact_sub_type_b: str | None = attribute(AttrKind.STRING, optional=True)
    is_reserved: bool | None = attribute(AttrKind.BOOL, default=False)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)


class RelationshipTypeResource(ResourceAdapter):
    type_name = "civicrm_relationship_type"
    entity = "RelationshipType"
    label = "relationship type"
    model_cls = RelationshipType
