# tests/conftest.py

import copy

import pytest

SAMPLE_DEFINITION = {
    "id": "/subscriptions/sub-1/resourceGroups/rg-1/providers/Microsoft.ContainerService/containerServices/acs-1",
    "location": "westeurope",
    "name": "acs-1",
    "tags": {"env": "test"},
    "type": "Microsoft.ContainerService/ContainerServices",
    "properties": {
        "provisioningState": "Succeeded",
        "orchestratorProfile": {"orchestratorType": "kubernetes", "orchestratorVersion": "1.7.7"},
        "masterProfile": {
            "count": 3,
            "dnsPrefix": "acs1mgmt",
            "vmSize": "Standard_D2_v2",
            "storageProfile": "ManagedDisks",
            "fqdn": "acs1mgmt.westeurope.cloudapp.azure.com",
        },
        "agentPoolProfiles": [
            {
                "name": "linuxpool",
                "count": 2,
                "vmSize": "Standard_D2_v2",
                "dnsPrefix": "",
                "fqdn": "",
                "storageProfile": "ManagedDisks",
                "osType": "Linux",
                "ports": [80, 443],
            },
            {
                "name": "winpool",
                "count": 1,
                "vmSize": "Standard_D2_v2",
                "dnsPrefix": "",
                "fqdn": "",
                "storageProfile": "StorageAccount",
                "osType": "Windows",
                "vnetSubnetID": "/subscriptions/sub-1/resourceGroups/rg-1/providers/Microsoft.Network/virtualNetworks/vnet/subnets/agents",
            },
        ],
        "linuxProfile": {"adminUsername": "azureuser", "ssh": {"publicKeys": [{"keyData": "ssh-rsa AAAA test"}]}},
        "windowsProfile": {"adminUsername": "winadmin", "adminPassword": "P@ssw0rd!"},
        "servicePrincipalProfile": {"clientId": "client-id", "secret": "plain-secret"},
    },
}


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    configuration seen by the code under test is predictable and isolated
    from the actual environment.
    """
    monkeypatch.setenv("CONTAINERSERVICE_JSON_INDENT", "2")
    monkeypatch.setenv("CONTAINERSERVICE_SHOW_SECRETS", "false")


@pytest.fixture
def sample_definition():
    """A wire-form container service definition, copied so tests may modify it."""
    return copy.deepcopy(SAMPLE_DEFINITION)
