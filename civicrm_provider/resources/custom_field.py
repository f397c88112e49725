"""Custom field resource."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class CustomField:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    custom_group_id: int | None = attribute(AttrKind.INT64, required=True)
    name: str | None = attribute(AttrKind.STRING, required=True)
    label: str | None = attribute(AttrKind.STRING, required=True)
    data_type: str | None = attribute(
        AttrKind.STRING, required=True, description="String, Int, Float, Money, Memo, Date, Boolean, ..."
    )
    html_type: str | None = attribute(
        AttrKind.STRING, required=True, description="Text, TextArea, Select, Radio, CheckBox, ..."
    )
    default_value: str | None = attribute(AttrKind.STRING, optional=True)
    is_required: bool | None = attribute(AttrKind.BOOL, default=False)
    is_searchable: bool | None = attribute(AttrKind.BOOL, default=False)
    is_search_range: bool | None = attribute(AttrKind.BOOL, default=False)
    weight: int | None = attribute(AttrKind.INT64, default=1)
    help_pre: str | None = attribute(AttrKind.STRING, optional=True)
    help_post: str | None = attribute(AttrKind.STRING, optional=True)
    attributes: str | None = attribute(AttrKind.STRING, optional=True, description="Extra HTML attributes")
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    is_view: bool | None = attribute(AttrKind.BOOL, default=False)
    options_per_line: int | None = attribute(AttrKind.INT64, optional=True)
    text_length: int | None = attribute(AttrKind.INT64, default=255)
    start_date_years: int | None = attribute(AttrKind.INT64, optional=True)
    end_date_years: int | None = attribute(AttrKind.INT64, optional=True)
    date_format: str | None = attribute(AttrKind.STRING, optional=True)
    time_format: int | None = attribute(AttrKind.INT64, optional=True)
    note_columns: int | None = attribute(AttrKind.INT64, default=60)
    note_rows: int | None = attribute(AttrKind.INT64, default=4)
    column_name: str | None = attribute(
        AttrKind.STRING,
        optional=True,
        computed=True,
        create_only=True,
        description="Database column; generated when not set",
    )
    option_group_id: int | None = attribute(AttrKind.INT64, optional=True)
    serialize: int | None = attribute(AttrKind.INT64, default=0)
    filter: str | None = attribute(AttrKind.STRING, optional=True)
    in_selector: bool | None = attribute(AttrKind.BOOL, default=False)
    fk_entity: str | None = attribute(AttrKind.STRING, optional=True)
    fk_entity_on_delete: str | None = attribute(AttrKind.STRING, default="set_null")


class CustomFieldResource(ResourceAdapter):
    type_name = "civicrm_custom_field"
    entity = "CustomField"
    label = "custom field"
    model_cls = CustomField
