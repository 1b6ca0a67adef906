# src/containerservice/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""

from abc import ABC, abstractmethod

from ..models.container_service import ClusterResource


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report(self, resource: ClusterResource):
        """
        Presents a cluster definition in a specific format.
        """
        pass
