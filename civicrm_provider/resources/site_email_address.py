"""Site email address resource (the "From" addresses offered for outbound mail)."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class SiteEmailAddress:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    display_name: str | None = attribute(AttrKind.STRING, required=True)
    email: str | None = attribute(AttrKind.STRING, required=True)
    description: str | None = attribute(AttrKind.STRING, optional=True)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    is_default: bool | None = attribute(AttrKind.BOOL, default=False)
    domain_id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)


class SiteEmailAddressResource(ResourceAdapter):
    type_name = "civicrm_site_email_address"
    entity = "SiteEmailAddress"
    label = "site email address"
    model_cls = SiteEmailAddress
