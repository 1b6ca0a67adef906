# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""

from unittest.mock import MagicMock, call

import pytest

from containerservice.core.parser import parse_cluster_resource
from containerservice.models.container_service import ClusterProperties, ClusterResource
from containerservice.reporters.console_reporter import MASK, ConsoleReporter


@pytest.fixture
def mock_rich(mocker):
    """Patches Console and Table in the reporter's module and returns (console, tables)."""
    mock_console_class = mocker.patch("containerservice.reporters.console_reporter.Console")
    mock_table_class = mocker.patch("containerservice.reporters.console_reporter.Table")

    mock_console_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance
    tables = []

    def _new_table(*args, **kwargs):
        table = MagicMock()
        table.kwargs = kwargs
        tables.append(table)
        return table

    mock_table_class.side_effect = _new_table
    return mock_console_instance, tables


def _rows(table):
    return [c.args for c in table.add_row.call_args_list]


def test_console_reporter_with_agent_pools(mock_rich, sample_definition):
    console, tables = mock_rich
    resource = parse_cluster_resource(sample_definition)

    ConsoleReporter().report(resource)

    assert len(tables) == 2
    summary, pools = tables
    assert summary.kwargs.get("title") == "Container Service acs-1"
    assert pools.kwargs.get("title") == "Agent Pools"
    assert pools.kwargs.get("header_style") == "bold magenta"

    summary_rows = dict(_rows(summary))
    assert summary_rows["Orchestrator"] == "Kubernetes"
    assert summary_rows["Swarm Mode"] == "no"
    assert summary_rows["Windows Agents"] == "yes"
    assert summary_rows["Masters"] == "3 x Standard_D2_v2"
    assert summary_rows["Provisioning State"] == "Succeeded"

    expected_column_calls = [
        call("Name", style="cyan"),
        call("Count", justify="right"),
        call("VM Size"),
        call("OS", style="green"),
        call("Storage"),
        call("Custom VNET"),
        call("Ports", style="dim"),
    ]
    pools.add_column.assert_has_calls(expected_column_calls, any_order=False)
    assert _rows(pools) == [
        ("linuxpool", "2", "Standard_D2_v2", "Linux", "ManagedDisks", "no", "80, 443"),
        ("winpool", "1", "Standard_D2_v2", "Windows", "StorageAccount", "yes", ""),
    ]
    console.print.assert_has_calls([call(summary), call(pools)])


def test_console_reporter_masks_secrets(mock_rich, sample_definition):
    _, tables = mock_rich

    ConsoleReporter().report(parse_cluster_resource(sample_definition))

    summary_rows = dict(_rows(tables[0]))
    assert summary_rows["Windows Password"] == MASK
    assert summary_rows["Service Principal Secret"] == MASK


def test_console_reporter_shows_secrets_when_asked(mock_rich, sample_definition):
    _, tables = mock_rich

    ConsoleReporter(show_secrets=True).report(parse_cluster_resource(sample_definition))

    summary_rows = dict(_rows(tables[0]))
    assert summary_rows["Windows Password"] == "P@ssw0rd!"
    assert summary_rows["Service Principal Secret"] == "plain-secret"


def test_console_reporter_shows_key_vault_reference(mock_rich, sample_definition):
    _, tables = mock_rich
    sample_definition["properties"]["servicePrincipalProfile"]["secret"] = (
        "/subscriptions/s/resourceGroups/rg/providers/Microsoft.KeyVault/vaults/kv/secrets/sp"
    )

    ConsoleReporter().report(parse_cluster_resource(sample_definition))

    assert dict(_rows(tables[0]))["Service Principal Secret"] == "keyvault:kv/sp (latest)"


def test_console_reporter_unset_os_type_reported_as_linux(mock_rich, sample_definition):
    _, tables = mock_rich
    del sample_definition["properties"]["agentPoolProfiles"][0]["osType"]

    ConsoleReporter().report(parse_cluster_resource(sample_definition))

    assert _rows(tables[1])[0][3] == "Linux"


def test_console_reporter_without_agent_pools(mock_rich):
    console, tables = mock_rich

    ConsoleReporter().report(ClusterResource(name="empty", properties=ClusterProperties()))

    assert len(tables) == 1
    console.print.assert_called_with("No agent pools defined.", style="yellow")


def test_console_reporter_unknown_os_type_shown_verbatim(mock_rich, sample_definition):
    _, tables = mock_rich
    sample_definition["properties"]["agentPoolProfiles"][1]["osType"] = "windows"

    ConsoleReporter().report(parse_cluster_resource(sample_definition))

    assert _rows(tables[1])[1][3] == "windows"
    assert dict(_rows(tables[0]))["Windows Agents"] == "no"


def test_console_reporter_without_orchestrator_type(mock_rich, sample_definition):
    _, tables = mock_rich
    del sample_definition["properties"]["orchestratorProfile"]["orchestratorType"]

    ConsoleReporter().report(parse_cluster_resource(sample_definition))

    summary_rows = dict(_rows(tables[0]))
    assert summary_rows["Orchestrator"] == ""
    assert summary_rows["Swarm Mode"] == "no"
