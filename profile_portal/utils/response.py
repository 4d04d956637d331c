from flask import current_app
import json
from datetime import datetime, date

class CustomJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that also understands datetime and date values.
    """
    def default(self, o):
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        return super().default(o)

def _json_response(payload, status):
    return (
        current_app.response_class(
            response=json.dumps(payload, cls=CustomJSONEncoder),
            status=status,
            mimetype="application/json",
        ),
        status,
    )

def success_response(result=None, message="Success", meta=None, status=200):
    """
    Creates a standardized success JSON response.
    """
    return _json_response(
        {
            "success": True,
            "message": message,
            "data": {"results": result if result is not None else [], "meta": meta or {}},
        },
        status,
    )

def error_response(error_code="bad_request", message="An error occurred.", details=None, status=400):
    """
    Creates a standardized error JSON response.
    """
    return _json_response(
        {
            "success": False,
            "error": {
                "code": error_code,
                "message": message,
                "details": details or {},
            },
        },
        status,
    )
