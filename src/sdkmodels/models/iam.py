"""Identity and Access Management models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from sdkmodels.codec import OpenEnum
from sdkmodels.models.base import SdkModel, SdkResponse


class UpdateCredentialOptionStatus(OpenEnum):
    """Access key status."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class UpdateCredentialOption(SdkModel):
    """Update an access key. At least one of ``status``/``description`` is set."""

    service: ClassVar[str] = "iam"

    status: UpdateCredentialOptionStatus | None = None
    description: str | None = None


class LoginPolicyOption(SdkModel):
    """Account login policy."""

    service: ClassVar[str] = "iam"

    # Days an unused account stays enabled.
    account_validity_period: int
    custom_info_for_login: str
    # Minutes, [15, 30].
    lockout_duration: int
    # [3, 10].
    login_failed_times: int
    # Minutes, [15, 60].
    period_with_login_failures: int
    # Minutes, [15, 1440].
    session_timeout: int
    show_recent_login_info: bool


class ListEnterpriseProjectsResDetail(SdkModel):
    service: ClassVar[str] = "iam"

    id: str
    name: str
    description: str | None = None


class ListEnterpriseProjectsForUserResponse(SdkResponse):
    service: ClassVar[str] = "iam"

    enterprise_projects: list[ListEnterpriseProjectsResDetail] | None = Field(
        default=None, alias="enterprise-projects"
    )
