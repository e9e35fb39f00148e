"""RFC 7807 problem responses for domain errors."""

from fastapi.responses import JSONResponse

PROBLEM_BASE_URL = "https://printflow.example.com/errors"


def problem_response(
    status: int,
    error_type: str,
    title: str,
    detail: str,
    instance: str,
) -> JSONResponse:
    """Build an RFC 7807 problem details response.

    Args:
        status: HTTP status code.
        error_type: Short error slug appended to PROBLEM_BASE_URL.
        title: Short human-readable summary.
        detail: Human-readable explanation of this occurrence.
        instance: Request path the problem occurred on.
    """
    return JSONResponse(
        status_code=status,
        content={
            "type": f"{PROBLEM_BASE_URL}/{error_type}",
            "title": title,
            "status": status,
            "detail": detail,
            "instance": instance,
        },
        media_type="application/problem+json",
    )
