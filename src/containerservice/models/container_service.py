# src/containerservice/models/container_service.py
"""
Pydantic data models for an ARM container service resource.

The models mirror the JSON schema of the container service API: field names on
the wire are camelCase (see the aliases below) while the Python attributes are
snake_case. Records are frozen; the only state that can change after
construction is the internal subnet of the master and agent pool profiles,
which is kept out of every serialized form.
"""

import re
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt, field_validator, model_serializer

from ..core.exceptions import DecodeError

# Storage backing modes for cluster VMs.
MANAGED_DISKS = "ManagedDisks"
STORAGE_ACCOUNT = "StorageAccount"

KEY_VAULT_SECRET_PATTERN = re.compile(
    r"^/subscriptions/(?P<subscription_id>[^/]+)"
    r"/resourceGroups/(?P<resource_group>[^/]+)"
    r"/providers/Microsoft\.KeyVault/vaults/(?P<vault_name>[^/]+)"
    r"/secrets/(?P<secret_name>[^/]+)"
    r"(?:/(?P<secret_version>[^/]+))?$"
)


class ProvisioningState(str, Enum):
    """Current state of a container service resource."""

    CREATING = "Creating"
    UPDATING = "Updating"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    DELETING = "Deleting"
    # Moving from one subscription or resource group to another
    MIGRATING = "Migrating"


class OrchestratorType(str, Enum):
    """Orchestrators supported by the container service."""

    DCOS = "DCOS"
    KUBERNETES = "Kubernetes"
    SWARM = "Swarm"
    DOCKER_CE = "DockerCE"

    @classmethod
    def decode(cls, text: Any) -> "OrchestratorType":
        return decode_orchestrator_type(text)


class OSType(str, Enum):
    """Known operating systems of an agent pool. Other values are carried as plain strings."""

    LINUX = "Linux"
    WINDOWS = "Windows"


_ORCHESTRATOR_TYPES_BY_NAME = {member.value.lower(): member for member in OrchestratorType}
_OS_TYPES_BY_NAME = {member.value: member for member in OSType}


def decode_orchestrator_type(text: Any) -> OrchestratorType:
    """
    Decodes an orchestrator type, ignoring case.

    Returns the canonical OrchestratorType member for any casing of a known
    name ("dcos", "DcOs" -> OrchestratorType.DCOS).

    Raises:
        DecodeError: If the text names no known orchestrator.
    """
    if isinstance(text, OrchestratorType):
        return text
    name = text
    if isinstance(text, bytes):
        try:
            name = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(text, field="orchestratorType") from e
    if isinstance(name, str):
        member = _ORCHESTRATOR_TYPES_BY_NAME.get(name.lower())
        if member is not None:
            return member
    raise DecodeError(text, field="orchestratorType")


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and len(value) == 0)


class ArmModel(BaseModel):
    """
    Base class for every record of the resource model.

    Fields listed in `omit_empty` are dropped from the serialized output when
    they hold no value, so unset optionals never reach the wire as null.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    omit_empty: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty_fields(self, handler):
        data = handler(self)
        fields = type(self).model_fields
        for name in self.omit_empty:
            for key in {name, fields[name].alias or name}:
                if key in data and _is_empty(data[key]):
                    del data[key]
        return data


class PurchasePlan(ArmModel):
    """Resource plan as required by ARM for billing purposes."""

    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"name", "product", "promotion_code", "publisher"})

    name: Optional[str] = Field(None, description="Plan name")
    product: Optional[str] = Field(None, description="Product offered by the publisher")
    promotion_code: Optional[str] = Field(None, alias="promotionCode", description="Promotion code")
    publisher: Optional[str] = Field(None, description="Plan publisher")


class ServicePrincipalProfile(ArmModel):
    """
    Client and secret used by the cluster for Azure resource CRUD.

    `secret` is either plain text or a reference to a key vault secret of the
    form "/subscriptions/<SUB_ID>/resourceGroups/<RG_NAME>/providers/
    Microsoft.KeyVault/vaults/<KV_NAME>/secrets/<NAME>[/<VERSION>]". The
    reference is carried as is; resolving it is up to the caller.
    """

    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"client_id", "secret"})

    client_id: Optional[str] = Field(None, alias="clientId", description="Service principal client ID")
    secret: Optional[str] = Field(None, description="Secret value or key vault secret reference")

    def is_key_vault_secret(self) -> bool:
        return self.key_vault_secret_ref() is not None

    def key_vault_secret_ref(self) -> Optional["KeyVaultSecretRef"]:
        """Splits a key vault secret reference into its parts, or returns None for a plain secret."""
        if not self.secret:
            return None
        match = KEY_VAULT_SECRET_PATTERN.match(self.secret)
        if not match:
            return None
        return KeyVaultSecretRef(**match.groupdict())


class KeyVaultSecretRef(BaseModel):
    """Components of a key vault secret reference. A missing version means the latest one."""

    model_config = ConfigDict(frozen=True)

    subscription_id: str
    resource_group: str
    vault_name: str
    secret_name: str
    secret_version: Optional[str] = None


class CustomProfile(ArmModel):
    """Custom properties used for cluster instantiation. Should not be used by most users."""

    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"orchestrator"})

    orchestrator: Optional[str] = Field(None, description="Custom orchestrator name")


class PublicKey(ArmModel):
    key_data: str = Field("", alias="keyData", description="SSH public key material")


class SSHConfiguration(ArmModel):
    public_keys: List[PublicKey] = Field(default_factory=list, alias="publicKeys")


class LinuxProfile(ArmModel):
    """Linux configuration passed to the cluster."""

    admin_username: str = Field("", alias="adminUsername", description="Admin user name")
    ssh: SSHConfiguration = Field(default_factory=SSHConfiguration, description="SSH configuration")


class WindowsProfile(ArmModel):
    """Windows configuration passed to the cluster."""

    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"admin_username", "admin_password"})

    admin_username: Optional[str] = Field(None, alias="adminUsername", description="Admin user name")
    admin_password: Optional[str] = Field(None, alias="adminPassword", description="Admin password")


class OrchestratorProfile(ArmModel):
    orchestrator_type: Optional[OrchestratorType] = Field(None, alias="orchestratorType")
    orchestrator_version: str = Field("", alias="orchestratorVersion")

    @field_validator("orchestrator_type", mode="before")
    @classmethod
    def _decode_orchestrator_type(cls, value: Any) -> Optional[OrchestratorType]:
        # DecodeError must reach the caller unwrapped, so it does not derive from ValueError.
        if value is None:
            return None
        return decode_orchestrator_type(value)

    def is_swarm_mode(self) -> bool:
        """True if this profile is for the Docker CE orchestrator."""
        return self.orchestrator_type == OrchestratorType.DOCKER_CE


class MasterProfile(ArmModel):
    """Definition of the master nodes of a cluster."""

    omit_empty: ClassVar[FrozenSet[str]] = frozenset(
        {"os_disk_size_gb", "vnet_subnet_id", "first_consecutive_static_ip", "storage_profile", "fqdn"}
    )

    count: StrictInt = Field(0, description="Number of masters")
    dns_prefix: str = Field("", alias="dnsPrefix")
    vm_size: str = Field("", alias="vmSize")
    os_disk_size_gb: Optional[StrictInt] = Field(None, alias="osDiskSizeGB")
    vnet_subnet_id: Optional[str] = Field(None, alias="vnetSubnetID")
    first_consecutive_static_ip: Optional[str] = Field(None, alias="firstConsecutiveStaticIP")
    storage_profile: Optional[str] = Field(None, alias="storageProfile")
    # Master LB public endpoint in the form FQDN:2376. Returned on GET, ignored on PUT.
    fqdn: Optional[str] = Field(None, description="Master FQDN")

    _subnet: str = PrivateAttr(default="")

    def is_custom_vnet(self) -> bool:
        """True if the customer brought their own VNET."""
        return bool(self.vnet_subnet_id)

    def is_managed_disks(self) -> bool:
        return self.storage_profile == MANAGED_DISKS

    def is_storage_account(self) -> bool:
        return self.storage_profile == STORAGE_ACCOUNT

    def get_subnet(self) -> str:
        return self._subnet

    def set_subnet(self, subnet: str) -> None:
        self._subnet = subnet


class AgentPoolProfile(ArmModel):
    """
    Configuration of the VMs running agent daemons that register with the
    master and offer resources to host applications in containers.

    `os_type` was added to the API later and may be unset; consumers treat an
    unset value as Linux. `is_linux()` itself only matches an explicit Linux,
    and comparisons are exact, so "windows" is neither Windows nor Linux.
    """

    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"os_disk_size_gb", "ports", "vnet_subnet_id", "os_type"})

    name: str = Field("", description="Agent pool name")
    count: StrictInt = Field(0, description="Number of agents")
    vm_size: str = Field("", alias="vmSize")
    os_disk_size_gb: Optional[StrictInt] = Field(None, alias="osDiskSizeGB")
    dns_prefix: str = Field("", alias="dnsPrefix")
    fqdn: str = Field("", description="Agent pool FQDN")
    ports: Optional[List[StrictInt]] = Field(None, description="Ports exposed on the agent pool load balancer")
    storage_profile: str = Field("", alias="storageProfile")
    vnet_subnet_id: Optional[str] = Field(None, alias="vnetSubnetID")
    os_type: Optional[Union[OSType, str]] = Field(None, alias="osType")

    _subnet: str = PrivateAttr(default="")

    @field_validator("os_type", mode="before")
    @classmethod
    def _known_os_type(cls, value: Any) -> Any:
        # Exact names become OSType members; any other string is kept verbatim.
        if isinstance(value, str) and not isinstance(value, OSType):
            return _OS_TYPES_BY_NAME.get(value, value)
        return value

    def is_custom_vnet(self) -> bool:
        """True if the customer brought their own VNET."""
        return bool(self.vnet_subnet_id)

    def is_windows(self) -> bool:
        return self.os_type == OSType.WINDOWS

    def is_linux(self) -> bool:
        return self.os_type == OSType.LINUX

    def is_managed_disks(self) -> bool:
        return self.storage_profile == MANAGED_DISKS

    def is_storage_account(self) -> bool:
        return self.storage_profile == STORAGE_ACCOUNT

    def get_subnet(self) -> str:
        return self._subnet

    def set_subnet(self, subnet: str) -> None:
        self._subnet = subnet


class ClusterProperties(ArmModel):
    """The cluster definition."""

    omit_empty: ClassVar[FrozenSet[str]] = frozenset(
        {
            "provisioning_state",
            "orchestrator_profile",
            "master_profile",
            "agent_pool_profiles",
            "linux_profile",
            "windows_profile",
            "service_principal_profile",
            "custom_profile",
        }
    )

    provisioning_state: Optional[ProvisioningState] = Field(None, alias="provisioningState")
    orchestrator_profile: Optional[OrchestratorProfile] = Field(None, alias="orchestratorProfile")
    master_profile: Optional[MasterProfile] = Field(None, alias="masterProfile")
    agent_pool_profiles: Optional[List[AgentPoolProfile]] = Field(None, alias="agentPoolProfiles")
    linux_profile: Optional[LinuxProfile] = Field(None, alias="linuxProfile")
    windows_profile: Optional[WindowsProfile] = Field(None, alias="windowsProfile")
    service_principal_profile: Optional[ServicePrincipalProfile] = Field(None, alias="servicePrincipalProfile")
    custom_profile: Optional[CustomProfile] = Field(None, alias="customProfile")

    def has_windows(self) -> bool:
        """True if any agent pool of the cluster runs Windows."""
        return any(pool.os_type == OSType.WINDOWS for pool in self.agent_pool_profiles or [])


class ClusterResource(ArmModel):
    """A container service resource, following the ARM resource definition model."""

    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"id", "location", "name", "plan", "tags", "type"})

    id: Optional[str] = Field(None, description="Fully qualified resource ID")
    location: Optional[str] = Field(None, description="Resource location")
    name: Optional[str] = Field(None, description="Resource name")
    plan: Optional[PurchasePlan] = Field(None, description="Billing plan")
    tags: Optional[Dict[str, str]] = Field(None, description="Resource tags")
    type: Optional[str] = Field(None, description="Resource type")

    properties: ClusterProperties = Field(..., description="Cluster definition")
