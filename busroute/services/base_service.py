# busroute/services/base_service.py
from datetime import datetime
from typing import Any, Optional

import structlog

from busroute.core.settings import Settings
from busroute.monitoring.monitoring import OptimizerMetrics


class BaseService:
    """Base class for all services."""

    def __init__(self, settings: Settings, metrics: Optional[OptimizerMetrics] = None):
        self.settings = settings
        self.metrics = metrics
        self.logger = structlog.get_logger(self.__class__.__name__)

    async def _execute_operation(
        self, operation_name: str, operation, *args, **kwargs
    ) -> Any:
        """
        Execute an operation with timing and error logging.

        Args:
            operation_name: Name of the operation
            operation: Async function to execute
            *args: Positional arguments for operation
            **kwargs: Keyword arguments for operation

        Returns:
            Operation result

        Raises:
            Whatever the operation raises, after logging it
        """
        start_time = datetime.now()
        try:
            result = await operation(*args, **kwargs)
        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            self.logger.error(
                "operation_failed",
                operation=operation_name,
                error=str(e),
                duration=duration,
            )
            raise

        duration = (datetime.now() - start_time).total_seconds()
        self.logger.debug(
            "operation_completed", operation=operation_name, duration=duration
        )
        return result
