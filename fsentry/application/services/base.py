"""Base service class for application services.

This module provides the base class for application services,
implementing common patterns for initialization, cleanup, and logging.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

logger = structlog.get_logger()


class ServiceBase(ABC):
    """Base class for all application services.

    Provides common functionality including:
    - Structured logging with service name
    - Resource initialization and cleanup
    - Context manager support for proper lifecycle management
    """

    def __init__(self, bound_logger: Optional[structlog.stdlib.BoundLogger] = None):
        """Initialize the service with a logger bound to the service name."""
        self.logger = (bound_logger or logger).bind(service=self.__class__.__name__)

    @abstractmethod
    def initialize(self) -> None:
        """Initialize service resources.

        This method should be called before using the service.
        """

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup service resources.

        This method should be called when the service is no longer needed.
        """

    def __enter__(self):
        """Enter the runtime context and initialize the service."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the runtime context and cleanup the service."""
        self.cleanup()
