"""Resource model of a container service cluster."""

from .container_service import (
    MANAGED_DISKS,
    STORAGE_ACCOUNT,
    AgentPoolProfile,
    ClusterProperties,
    ClusterResource,
    CustomProfile,
    KeyVaultSecretRef,
    LinuxProfile,
    MasterProfile,
    OrchestratorProfile,
    OrchestratorType,
    OSType,
    ProvisioningState,
    PublicKey,
    PurchasePlan,
    ServicePrincipalProfile,
    SSHConfiguration,
    WindowsProfile,
    decode_orchestrator_type,
)

__all__ = [
    "MANAGED_DISKS",
    "STORAGE_ACCOUNT",
    "AgentPoolProfile",
    "ClusterProperties",
    "ClusterResource",
    "CustomProfile",
    "KeyVaultSecretRef",
    "LinuxProfile",
    "MasterProfile",
    "OrchestratorProfile",
    "OrchestratorType",
    "OSType",
    "ProvisioningState",
    "PublicKey",
    "PurchasePlan",
    "ServicePrincipalProfile",
    "SSHConfiguration",
    "WindowsProfile",
    "decode_orchestrator_type",
]
