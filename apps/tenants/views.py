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
from .forms import TenantForm
from .models import Tenant

logger = logging.getLogger(__name__)


@login_required_json
@require_http_methods(['GET', 'POST'])
def tenant_list(request):
    """GET: list tenants (?property=<id>, ?status=) / POST: create one"""
    if request.method == 'POST':
        return _tenant_create(request)

    tenants = Tenant.active.filter(user=request.user).select_related('property')

    property_id = request.GET.get('property', '')
    if property_id.isdigit():
        tenants = tenants.filter(property_id=property_id)

    status = request.GET.get('status', '')
    if status:
        tenants = tenants.filter(status=status)

    return json_list(tenants)


def _tenant_create(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = TenantForm(payload, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    tenant = form.save(commit=False)
    tenant.user = request.user
    tenant.save()
    logger.info(f"Tenant created: {tenant.get_full_name()} (ID: {tenant.pk}, user: {request.user.pk})")
    return JsonResponse(tenant.to_dict(), status=201)


@login_required_json
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
def tenant_detail(request, pk):
    tenant = Tenant.active.select_related('property').filter(pk=pk, user=request.user).first()
    if tenant is None:
        return not_found('Tenant')

    if request.method == 'GET':
        return JsonResponse(tenant.to_dict())

    if request.method == 'DELETE':
        tenant.soft_delete()
        return JsonResponse({'message': 'Tenant removed'})

    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    data = merged_form_data(TenantForm, tenant, payload)
    form = TenantForm(data, instance=tenant, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    tenant = form.save()
    return JsonResponse(tenant.to_dict())
