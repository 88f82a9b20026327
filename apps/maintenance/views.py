import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.decorators import login_required_json
from apps.core.http import (
    BadJSON,
    form_error_response,
    json_error,
    json_list,
    merged_form_data,
    not_found,
    parse_body,
)
from apps.properties.models import Property
from .forms import MaintenanceRequestForm
from .models import MaintenanceRequest

logger = logging.getLogger(__name__)


def _requests_for(user):
    return MaintenanceRequest.active.filter(user=user).select_related('property', 'tenant')


@login_required_json
@require_http_methods(['GET', 'POST'])
def request_list(request):
    """GET: all maintenance requests / POST: create one"""
    if request.method == 'POST':
        return _request_create(request)
    return json_list(_requests_for(request.user))


def _request_create(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = MaintenanceRequestForm(payload, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    maintenance_request = form.save(commit=False)
    maintenance_request.user = request.user
    maintenance_request.save()
    logger.info(
        f"Maintenance request created: {maintenance_request.title} "
        f"(ID: {maintenance_request.pk}, priority: {maintenance_request.priority})"
    )
    return JsonResponse(maintenance_request.to_dict(), status=201)


@login_required_json
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
def request_detail(request, pk):
    maintenance_request = _requests_for(request.user).filter(pk=pk).first()
    if maintenance_request is None:
        return not_found('Maintenance request')

    if request.method == 'GET':
        return JsonResponse(maintenance_request.to_dict())

    if request.method == 'DELETE':
        maintenance_request.soft_delete()
        return JsonResponse({'message': 'Maintenance request removed'})

    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    data = merged_form_data(MaintenanceRequestForm, maintenance_request, payload)
    form = MaintenanceRequestForm(data, instance=maintenance_request, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    maintenance_request = form.save()
    return JsonResponse(maintenance_request.to_dict())


@login_required_json
@require_GET
def requests_by_property(request, property_id):
    if not Property.objects.filter(pk=property_id, user=request.user).exists():
        return not_found('Property')
    return json_list(_requests_for(request.user).filter(property_id=property_id))


@login_required_json
@require_GET
def requests_by_status(request, status):
    valid = dict(MaintenanceRequest.STATUS_CHOICES)
    if status not in valid:
        return json_error(f'Unknown status: {status}')
    return json_list(_requests_for(request.user).filter(status=status))
