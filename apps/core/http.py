"""
JSON request/response helpers shared by the API views
"""
import json
import logging

from django.forms.models import model_to_dict
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class BadJSON(ValueError):
    """Request body could not be decoded as a JSON object"""


def parse_body(request):
    """
    Return the request payload as a dict.

    JSON bodies are decoded; form-encoded POSTs fall back to request.POST.
    """
    content_type = request.content_type or ''
    if content_type.startswith('application/json'):
        if not request.body:
            return {}
        try:
            payload = json.loads(request.body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise BadJSON(f"Malformed JSON body: {e}") from e
        if not isinstance(payload, dict):
            raise BadJSON("JSON body must be an object")
        return payload
    return request.POST.dict()


def merged_form_data(form_class, instance, payload):
    """
    Partial update support: current field values overlaid with the payload
    """
    fields = form_class._meta.fields
    data = model_to_dict(instance, fields=fields)
    data = {key: value for key, value in data.items() if value is not None}
    data.update({key: value for key, value in payload.items() if key in fields})
    return data


def json_error(message, status=400, errors=None):
    body = {'message': message}
    if errors:
        body['errors'] = errors
    return JsonResponse(body, status=status)


def form_error_response(form):
    logger.debug(f"Validation failed: {form.errors.as_json()}")
    return json_error('Validation failed', status=400, errors=form.errors.get_json_data())


def not_found(label):
    return json_error(f'{label} not found', status=404)


def json_list(items):
    return JsonResponse([item.to_dict() for item in items], safe=False)
