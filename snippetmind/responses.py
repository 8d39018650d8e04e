"""
Response payloads returned by the HTTP layer
"""

from .normalizer import FIELDS


def success_payload(result):
    """Fixed four-field shape; anything missing is null"""
    values = result.to_dict() if hasattr(result, 'to_dict') else dict(result or {})
    return {
        "success": True,
        "response": {name: values.get(name) or None for name in FIELDS},
    }


def image_payload(image_url):
    return {"success": True, "imageUrl": image_url}


def error_payload(error, details=None):
    payload = {"success": False, "error": error}
    if details:
        payload["details"] = details
    return payload
