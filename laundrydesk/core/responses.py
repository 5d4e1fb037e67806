from typing import Any, Dict, List, Optional


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    count: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Build the success envelope

    Only the keys that carry a value are included, so list responses get
    ``count`` and write responses get ``message``.
    """
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if count is not None:
        body["count"] = count
    if message is not None:
        body["message"] = message
    return body


def error_response(
    error: str,
    details: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build the failure envelope"""
    body: Dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return body
