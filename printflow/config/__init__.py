"""Configuration module for PrintFlow.

Available Configurations:
- WorkflowConfig: Logging, notification delivery and demo data settings
"""

from printflow.config.workflow_config import (
    DEFAULT_WORKFLOW_CONFIG,
    DEVELOPMENT_WORKFLOW_CONFIG,
    WorkflowConfig,
)

__all__ = [
    "DEFAULT_WORKFLOW_CONFIG",
    "DEVELOPMENT_WORKFLOW_CONFIG",
    "WorkflowConfig",
]
