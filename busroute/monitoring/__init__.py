# busroute/monitoring/__init__.py
from busroute.monitoring.monitoring import OptimizerMetrics
from busroute.monitoring.logging_config import setup_logging

__all__ = ["OptimizerMetrics", "setup_logging"]
