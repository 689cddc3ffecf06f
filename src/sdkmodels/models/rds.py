"""Relational Database Service models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from sdkmodels.codec import OpenEnum
from sdkmodels.models.base import SdkModel, SdkResponse


class SetPostgresqlDbUserPwdRequestXLanguage(OpenEnum):
    """Response language."""

    ZH_CN = "zh-cn"
    EN_US = "en-us"


class DbUserPwdRequest(SdkModel):
    service: ClassVar[str] = "rds"

    name: str
    password: str


class SetPostgresqlDbUserPwdRequest(SdkModel):
    """Reset the password of a PostgreSQL database user."""

    service: ClassVar[str] = "rds"

    x_language: SetPostgresqlDbUserPwdRequestXLanguage | None = Field(
        default=None, alias="X-Language"
    )
    instance_id: str
    body: DbUserPwdRequest | None = None


class ComputeFlavor(SdkModel):
    service: ClassVar[str] = "rds"

    vcpus: str
    ram: str
    spec_code: str


class Computes(SdkModel):
    """A group of compute flavors of the same type."""

    service: ClassVar[str] = "rds"

    group_type: str
    computes: list[ComputeFlavor] = Field(default_factory=list)


class SearchQueryScaleFlavorsResponse(SdkResponse):
    service: ClassVar[str] = "rds"

    compute_flavor_groups: list[Computes] | None = None
