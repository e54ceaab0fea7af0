"""
Request body helpers shared by the API blueprints
"""

from flask import request

from exceptions import ValidationException


def json_body(required=True):
    """Decoded JSON body; None when optional and absent"""
    data = request.get_json(silent=True)
    if data is None:
        if required or request.content_length:
            raise ValidationException("Request body must be valid JSON")
        return None
    return data


def json_object(required=True):
    data = json_body(required=required)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationException("Request body must be a JSON object")
    return data


def id_list(value, field):
    """Validate a list of integer ids coming from a request body"""
    if not isinstance(value, list) or not all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        raise ValidationException(f"'{field}' must be a list of integer ids")
    return value


def optional_string(data, field):
    value = data.get(field)
    if value is not None and not isinstance(value, str):
        raise ValidationException(f"'{field}' must be a string")
    return value


def required_string(data, field):
    value = optional_string(data, field)
    if value is None:
        raise ValidationException(f"Missing required parameter: '{field}'")
    return value
