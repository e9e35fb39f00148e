"""PrintFlow domain layer: models, errors and pure workflow rules."""

from printflow.domain.exceptions import PrintFlowError

__all__: list[str] = ["PrintFlowError"]
