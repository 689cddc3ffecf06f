"""Model catalog for name-based lookup."""

from __future__ import annotations

import typing
from typing import Any

from sdkmodels.codec import OpenEnum, UnknownModelError
from sdkmodels.models.base import SdkModel
from sdkmodels.models.iam import (
    ListEnterpriseProjectsForUserResponse,
    ListEnterpriseProjectsResDetail,
    LoginPolicyOption,
    UpdateCredentialOption,
)
from sdkmodels.models.rds import (
    ComputeFlavor,
    Computes,
    DbUserPwdRequest,
    SearchQueryScaleFlavorsResponse,
    SetPostgresqlDbUserPwdRequest,
)


def _enum_types(annotation: Any) -> list[type[OpenEnum]]:
    """Enum families referenced by a field annotation (through unions/containers)."""
    if isinstance(annotation, type) and issubclass(annotation, OpenEnum):
        return [annotation]
    found: list[type[OpenEnum]] = []
    for arg in typing.get_args(annotation):
        found.extend(_enum_types(arg))
    return found


def _nested_models(annotation: Any) -> list[type[SdkModel]]:
    if isinstance(annotation, type) and issubclass(annotation, SdkModel):
        return [annotation]
    return [m for arg in typing.get_args(annotation) for m in _nested_models(arg)]


class ModelCatalog:
    """Registry mapping model class name -> model class."""

    def __init__(self) -> None:
        self._models: dict[str, type[SdkModel]] = {}

    def register(self, model: type[SdkModel]) -> None:
        name = model.__name__
        if name in self._models:
            raise ValueError(f"Model already registered: {name}")
        self._models[name] = model

    def get(self, name: str) -> type[SdkModel]:
        try:
            return self._models[name]
        except KeyError as e:
            raise UnknownModelError(name) from e

    def names(self, service: str | None = None) -> list[str]:
        return sorted(
            name for name, m in self._models.items() if service is None or m.service == service
        )

    def enum_families(self, name: str | None = None) -> list[type[OpenEnum]]:
        """Enum families used by one model (and its nested models), or by all of them."""
        pending = [self.get(name)] if name is not None else list(self._models.values())
        seen_models: set[type[SdkModel]] = set()
        families: dict[str, type[OpenEnum]] = {}
        while pending:
            model = pending.pop()
            if model in seen_models:
                continue
            seen_models.add(model)
            for field in model.model_fields.values():
                for family in _enum_types(field.annotation):
                    families.setdefault(family.__name__, family)
                pending.extend(_nested_models(field.annotation))
        return [families[k] for k in sorted(families)]


def default_catalog() -> ModelCatalog:
    """Create a fresh catalog with all built-in models."""
    catalog = ModelCatalog()

    catalog.register(UpdateCredentialOption)
    catalog.register(LoginPolicyOption)
    catalog.register(ListEnterpriseProjectsResDetail)
    catalog.register(ListEnterpriseProjectsForUserResponse)

    catalog.register(SetPostgresqlDbUserPwdRequest)
    catalog.register(DbUserPwdRequest)
    catalog.register(SearchQueryScaleFlavorsResponse)
    catalog.register(Computes)
    catalog.register(ComputeFlavor)

    return catalog
