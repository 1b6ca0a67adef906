class ContainerServiceError(Exception):
    """Base exception for containerservice."""

    pass


class DecodeError(ContainerServiceError):
    """Raised when an orchestrator type matches none of the known orchestrators."""

    def __init__(self, value, field: str = "orchestratorType"):
        self.value = value
        self.field = field
        super().__init__(f"OrchestratorType has unknown orchestrator: {value}")
