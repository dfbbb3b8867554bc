"""Pydantic models describing the Ambari REST API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AmbariBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ClusterInfo(AmbariBaseModel):
    cluster_name: str = ""


class ClusterItem(AmbariBaseModel):
    cluster: ClusterInfo = Field(alias="Clusters", default_factory=ClusterInfo)


class ClustersResponse(AmbariBaseModel):
    items: list[ClusterItem] = Field(default_factory=list["ClusterItem"])

    @property
    def first_cluster_name(self) -> str | None:
        if self.items and self.items[0].cluster.cluster_name:
            return self.items[0].cluster.cluster_name
        return None


class HostInfo(AmbariBaseModel):
    host_name: str
    ip: str = ""


class HostItem(AmbariBaseModel):
    host: HostInfo = Field(alias="Hosts")


class HostsResponse(AmbariBaseModel):
    items: list[HostItem] = Field(default_factory=list["HostItem"])


class HostRole(AmbariBaseModel):
    component_name: str
    host_name: str = ""
    state: str = ""
    maintenance_state: str | None = None


class HostComponentItem(AmbariBaseModel):
    host_role: HostRole = Field(alias="HostRoles")


class HostName(AmbariBaseModel):
    host_name: str


class ClusterHostItem(AmbariBaseModel):
    host: HostName = Field(alias="Hosts")
    host_components: list[HostComponentItem] = Field(default_factory=list["HostComponentItem"])


class HostComponentsResponse(AmbariBaseModel):
    items: list[ClusterHostItem] = Field(default_factory=list["ClusterHostItem"])


class RootServiceHostComponent(AmbariBaseModel):
    component_name: str
    component_state: str = ""
    host_name: str = ""


class RootHostComponentItem(AmbariBaseModel):
    root_component: RootServiceHostComponent = Field(alias="RootServiceHostComponents")


class RootComponentItem(AmbariBaseModel):
    host_components: list[RootHostComponentItem] = Field(
        alias="hostComponents", default_factory=list["RootHostComponentItem"]
    )


class RootServiceItem(AmbariBaseModel):
    components: list[RootComponentItem] = Field(default_factory=list["RootComponentItem"])


class RootHostComponentsResponse(AmbariBaseModel):
    items: list[RootServiceItem] = Field(default_factory=list["RootServiceItem"])
