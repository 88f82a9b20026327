import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

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
from .forms import LeaseForm
from .models import Lease

logger = logging.getLogger(__name__)


@login_required_json
@require_http_methods(['GET', 'POST'])
def lease_list(request):
    """GET: list leases (?property=<id>, ?status=) / POST: create one"""
    if request.method == 'POST':
        return _lease_create(request)

    leases = Lease.active.filter(user=request.user).select_related('property', 'tenant')

    property_id = request.GET.get('property', '')
    if property_id.isdigit():
        leases = leases.filter(property_id=property_id)

    status = request.GET.get('status', '')
    if status:
        leases = leases.filter(status=status)

    return json_list(leases)


def _lease_create(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = LeaseForm(payload, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    lease = form.save(commit=False)
    lease.user = request.user
    lease.save()
    logger.info(f"Lease created: {lease} (ID: {lease.pk}, user: {request.user.pk})")
    return JsonResponse(lease.to_dict(), status=201)


@login_required_json
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
def lease_detail(request, pk):
    lease = Lease.active.select_related('property', 'tenant').filter(pk=pk, user=request.user).first()
    if lease is None:
        return not_found('Lease')

    if request.method == 'GET':
        return JsonResponse(lease.to_dict())

    if request.method == 'DELETE':
        lease.soft_delete()
        return JsonResponse({'message': 'Lease removed'})

    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    data = merged_form_data(LeaseForm, lease, payload)
    form = LeaseForm(data, instance=lease, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    lease = form.save()
    return JsonResponse(lease.to_dict())
