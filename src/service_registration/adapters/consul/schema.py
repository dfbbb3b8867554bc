"""Pydantic models describing the Consul catalog and agent payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from service_registration.domain.model import SERVICE_PORT, RegistryEntry


class ConsulBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CatalogServices(RootModel[dict[str, list[str] | None]]):
    """``/v1/catalog/services``: service name to the union of its tags."""

    @property
    def names(self) -> list[str]:
        return sorted(self.root)


class CatalogServiceEntry(ConsulBaseModel):
    """One element of ``/v1/catalog/service/<name>``."""

    service_id: str = Field(alias="ServiceID")
    service_name: str = Field(alias="ServiceName")
    address: str = Field(alias="Address", default="")
    service_tags: list[str] = Field(alias="ServiceTags", default_factory=list[str])
    service_port: int = Field(alias="ServicePort", default=0)

    @field_validator("service_tags", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value

    def to_registry_entry(self) -> RegistryEntry:
        return RegistryEntry(
            id=self.service_id,
            service_name=self.service_name,
            address=self.address,
            tags=tuple(self.service_tags),
            port=self.service_port,
        )


class CatalogService(RootModel[list[CatalogServiceEntry]]):
    pass


class ServiceRegistration(ConsulBaseModel):
    """Body of ``PUT /v1/agent/service/register``."""

    id: str = Field(serialization_alias="ID")
    name: str = Field(serialization_alias="Name")
    address: str = Field(serialization_alias="Address")
    port: int = Field(serialization_alias="Port", default=SERVICE_PORT)
    tags: list[str] = Field(serialization_alias="Tags", default_factory=list[str])

    @classmethod
    def from_entry(cls, entry: RegistryEntry) -> ServiceRegistration:
        return cls(
            id=entry.id,
            name=entry.service_name,
            address=entry.address,
            port=entry.port,
            tags=list(entry.tags),
        )

    def payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
