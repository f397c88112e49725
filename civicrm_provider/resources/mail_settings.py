"""
Mail settings resource.

Configures the mail accounts CiviCRM polls for bounces and email-to-activity
processing. The account password is write-only: the API never returns it,
so the declared value is kept as-is in state.
"""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class MailSettings:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    domain_id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    name: str | None = attribute(AttrKind.STRING, required=True)
    is_default: bool | None = attribute(AttrKind.BOOL, default=False)
    domain: str | None = attribute(AttrKind.STRING, optional=True, description="Email domain")
    localpart: str | None = attribute(AttrKind.STRING, optional=True)
    return_path: str | None = attribute(AttrKind.STRING, optional=True)
    protocol: str | None = attribute(
        AttrKind.STRING, optional=True, description="IMAP, Maildir, POP3 or Localdir"
    )
    server: str | None = attribute(AttrKind.STRING, optional=True)
    port: int | None = attribute(AttrKind.INT64, optional=True)
    username: str | None = attribute(AttrKind.STRING, optional=True)
    password: str | None = attribute(AttrKind.STRING, optional=True, sensitive=True)
    is_ssl: bool | None = attribute(AttrKind.BOOL, default=False)
    source: str | None = attribute(AttrKind.STRING, optional=True, description="Folder to poll")
    activity_status: str | None = attribute(AttrKind.STRING, optional=True)
    is_non_case_email_skipped: bool | None = attribute(AttrKind.BOOL, default=False)
    is_contact_creation_disabled_if_no_match: bool | None = attribute(AttrKind.BOOL, default=False)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    activity_type_id: int | None = attribute(AttrKind.INT64, optional=True)
    campaign_id: int | None = attribute(AttrKind.INT64, optional=True)
    activity_source: str | None = attribute(AttrKind.STRING, optional=True)
    activity_targets: str | None = attribute(AttrKind.STRING, optional=True)
    activity_assignees: str | None = attribute(AttrKind.STRING, optional=True)


class MailSettingsResource(ResourceAdapter):
    type_name = "civicrm_mail_settings"
    entity = "MailSettings"
    label = "mail settings"
    model_cls = MailSettings
