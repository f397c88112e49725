"""Contact type resource."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class ContactType:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    name: str | None = attribute(AttrKind.STRING, required=True)
    label: str | None = attribute(AttrKind.STRING, required=True)
    description: str | None = attribute(AttrKind.STRING, optional=True)
    image_url: str | None = attribute(AttrKind.STRING, optional=True, wire_name="image_URL")
    icon: str | None = attribute(AttrKind.STRING, optional=True, description="Font Awesome icon class")
    parent_id: int | None = attribute(
        AttrKind.INT64, optional=True, description="Parent contact type for subtypes"
    )
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    is_reserved: bool | None = attribute(AttrKind.BOOL, default=False)


class ContactTypeResource(ResourceAdapter):
    type_name = "civicrm_contact_type"
    entity = "ContactType"
    label = "contact type"
    model_cls = ContactType
