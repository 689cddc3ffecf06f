"""SDK request/response models."""

from sdkmodels.models.base import SdkModel, SdkResponse
from sdkmodels.models.catalog import ModelCatalog, default_catalog
from sdkmodels.models.iam import (
    ListEnterpriseProjectsForUserResponse,
    ListEnterpriseProjectsResDetail,
    LoginPolicyOption,
    UpdateCredentialOption,
    UpdateCredentialOptionStatus,
)
from sdkmodels.models.rds import (
    ComputeFlavor,
    Computes,
    DbUserPwdRequest,
    SearchQueryScaleFlavorsResponse,
    SetPostgresqlDbUserPwdRequest,
    SetPostgresqlDbUserPwdRequestXLanguage,
)

__all__ = [
    "ComputeFlavor",
    "Computes",
    "DbUserPwdRequest",
    "ListEnterpriseProjectsForUserResponse",
    "ListEnterpriseProjectsResDetail",
    "LoginPolicyOption",
    "ModelCatalog",
    "SdkModel",
    "SdkResponse",
    "SearchQueryScaleFlavorsResponse",
    "SetPostgresqlDbUserPwdRequest",
    "SetPostgresqlDbUserPwdRequestXLanguage",
    "UpdateCredentialOption",
    "UpdateCredentialOptionStatus",
    "default_catalog",
]
