"""Custom field group resource."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class CustomGroup:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    name: str | None = attribute(AttrKind.STRING, required=True)
    title: str | None = attribute(AttrKind.STRING, required=True)
    extends: str | None = attribute(
        AttrKind.STRING, required=True, description="Entity extended (e.g. Contact, Individual)"
    )
    extends_entity_column_id: int | None = attribute(AttrKind.INT64, optional=True)
    extends_entity_column_value: list[str] | None = attribute(AttrKind.STRING_LIST, optional=True)
    style: str | None = attribute(AttrKind.STRING, default="Inline", description="Inline, Tab or Tab with table")
    collapse_display: bool | None = attribute(AttrKind.BOOL, default=False)
    help_pre: str | None = attribute(AttrKind.STRING, optional=True)
    help_post: str | None = attribute(AttrKind.STRING, optional=True)
    weight: int | None = attribute(AttrKind.INT64, default=1)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    table_name: str | None = attribute(
        AttrKind.STRING,
        optional=True,
        computed=True,
        create_only=True,
        description="Database table; generated when not set",
    )
    is_multiple: bool | None = attribute(AttrKind.BOOL, default=False)
    min_multiple: int | None = attribute(AttrKind.INT64, optional=True)
    max_multiple: int | None = attribute(AttrKind.INT64, optional=True)
    collapse_adv_display: bool | None = attribute(AttrKind.BOOL, default=True)
    is_reserved: bool | None = attribute(AttrKind.BOOL, default=False)
    is_public: bool | None = attribute(AttrKind.BOOL, default=True)
    icon: str | None = attribute(AttrKind.STRING, optional=True)


class CustomGroupResource(ResourceAdapter):
    type_name = "civicrm_custom_group"
    entity = "CustomGroup"
    label = "custom group"
    model_cls = CustomGroup
