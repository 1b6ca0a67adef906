"""ARM resource model for managed container service clusters."""

__version__ = "0.1.0"
