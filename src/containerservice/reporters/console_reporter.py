# src/containerservice/reporters/console_reporter.py
"""
A reporter that displays a cluster definition in formatted tables in the console.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from ..core.config import config
from ..models.container_service import AgentPoolProfile, ClusterResource, OSType, ServicePrincipalProfile
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)

MASK = "********"


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _os_name(pool: AgentPoolProfile) -> str:
    # An unset OS type is reported as Linux.
    if not pool.os_type:
        return OSType.LINUX.value
    return pool.os_type.value if isinstance(pool.os_type, OSType) else pool.os_type


class ConsoleReporter(BaseReporter):
    """
    Renders a cluster definition to the console using the 'rich' library.
    """

    def __init__(self, show_secrets: Optional[bool] = None):
        self.console = Console()
        self.show_secrets = config.SHOW_SECRETS if show_secrets is None else show_secrets

    def _secret(self, value: Optional[str]) -> str:
        if not value:
            return ""
        return value if self.show_secrets else MASK

    def _service_principal_secret(self, profile: ServicePrincipalProfile) -> str:
        ref = profile.key_vault_secret_ref()
        if ref is not None:
            # A vault reference holds no secret material and is always shown.
            version = ref.secret_version or "latest"
            return f"keyvault:{ref.vault_name}/{ref.secret_name} ({version})"
        return self._secret(profile.secret)

    def report(self, resource: ClusterResource):
        """
        Displays a summary of the cluster and, if it has any, a table of its agent pools.
        """
        props = resource.properties

        summary = Table(
            title=f"Container Service {resource.name or ''}".strip(),
            header_style="bold magenta",
            show_header=False,
        )
        summary.add_column("Property", style="cyan")
        summary.add_column("Value")

        summary.add_row("ID", resource.id or "")
        summary.add_row("Location", resource.location or "")
        summary.add_row("Provisioning State", props.provisioning_state.value if props.provisioning_state else "")

        orchestrator = props.orchestrator_profile
        if orchestrator is not None:
            summary.add_row(
                "Orchestrator", orchestrator.orchestrator_type.value if orchestrator.orchestrator_type else ""
            )
            summary.add_row("Orchestrator Version", orchestrator.orchestrator_version)
            summary.add_row("Swarm Mode", _yes_no(orchestrator.is_swarm_mode()))
        if props.custom_profile is not None and props.custom_profile.orchestrator:
            summary.add_row("Custom Orchestrator", props.custom_profile.orchestrator)

        master = props.master_profile
        if master is not None:
            summary.add_row("Masters", f"{master.count} x {master.vm_size}")
            summary.add_row("Master DNS Prefix", master.dns_prefix)
            if master.fqdn:
                summary.add_row("Master FQDN", master.fqdn)
            summary.add_row("Master Custom VNET", _yes_no(master.is_custom_vnet()))
            if master.storage_profile:
                summary.add_row("Master Storage", master.storage_profile)

        summary.add_row("Windows Agents", _yes_no(props.has_windows()))

        if props.linux_profile is not None:
            summary.add_row("Linux Admin", props.linux_profile.admin_username)
            summary.add_row("SSH Keys", str(len(props.linux_profile.ssh.public_keys)))
        if props.windows_profile is not None:
            summary.add_row("Windows Admin", props.windows_profile.admin_username or "")
            summary.add_row("Windows Password", self._secret(props.windows_profile.admin_password))
        if props.service_principal_profile is not None:
            summary.add_row("Service Principal", props.service_principal_profile.client_id or "")
            summary.add_row("Service Principal Secret", self._service_principal_secret(props.service_principal_profile))

        self.console.print(summary)

        pools = props.agent_pool_profiles or []
        if not pools:
            self.console.print("No agent pools defined.", style="yellow")
            return

        table = Table(
            title="Agent Pools",
            header_style="bold magenta",
            show_lines=True,
        )
        table.add_column("Name", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("VM Size")
        table.add_column("OS", style="green")
        table.add_column("Storage")
        table.add_column("Custom VNET")
        table.add_column("Ports", style="dim")

        for pool in pools:
            table.add_row(
                pool.name,
                str(pool.count),
                pool.vm_size,
                _os_name(pool),
                pool.storage_profile,
                _yes_no(pool.is_custom_vnet()),
                ", ".join(str(port) for port in pool.ports or []),
            )

        self.console.print(table)
        logger.debug("Reported %d agent pool(s)", len(pools))
