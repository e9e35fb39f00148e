"""Domain errors for PrintFlow.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from PrintFlowError.
"""

from printflow.domain.errors.notification import InvalidTemplateError
from printflow.domain.errors.task import TaskNotFoundError, TransitionForbiddenError

__all__: list[str] = [
    "InvalidTemplateError",
    "TaskNotFoundError",
    "TransitionForbiddenError",
]
