from typing import Any, Dict, Optional
from flask import request
from marshmallow import ValidationError, Schema
from profile_portal.utils.error_messages import ERROR_MESSAGES

def validate_request(schema: Schema, data: Optional[Dict[str, Any]] = None, partial: bool = False) -> Dict[str, Any]:
    """
    Validate request data against a Marshmallow schema.
    If data is not provided, it is read from the request JSON body.
    Raises ValueError carrying the field error messages.
    """
    if data is None:
        data = request.get_json(silent=True)

    if not isinstance(data, dict):
        raise ValueError({"_schema": [ERROR_MESSAGES["validation"]["request_body_empty"]]})

    try:
        return schema.load(data, partial=partial)
    except ValidationError as err:
        raise ValueError(err.messages)
