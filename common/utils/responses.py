"""
Job result envelopes.

Every outcome the CLI job prints (or a runner stores) has the same envelope:
{"success": true, "data": ..., "message": ...} or
{"success": false, "error": {"message", "code", ...}}.

Example:
    from common.utils import success_response

    user = await action.invoke(params, context)
    click.echo(json.dumps(success_response(user, message="User updated")))
"""

from typing import Any, Dict, Optional


def success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Wrap an action result. `data` and `message` are left out when empty."""
    envelope: Dict[str, Any] = {"success": True}
    if data is not None:
        envelope["data"] = data
    if message:
        envelope["message"] = message
    return envelope


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    status_code: Optional[int] = None,
    retryable: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Wrap an action failure.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "VALIDATION_ERROR")
        details: Extra error details, such as pydantic validation errors
        status_code: HTTP status of the remote call that failed
        retryable: Whether the runner may retry the job

    Returns:
        Dictionary with success=False and the error fields that are set
    """
    error: Dict[str, Any] = {"message": message}

    optional = {
        "code": code,
        "details": details,
        "statusCode": status_code,
        "retryable": retryable,
    }
    error.update({k: v for k, v in optional.items() if v is not None})

    return {"success": False, "error": error}
