import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone
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
from apps.transactions.models import Transaction
from apps.transactions.summary import summarize
from apps.transactions.utils import parse_months, records_from_queryset
from .forms import PropertyForm
from .models import Property

logger = logging.getLogger(__name__)


# ============================================================
# Property CRUD
# ============================================================

@login_required_json
@require_http_methods(['GET', 'POST'])
def property_list(request):
    """GET: list the user's properties / POST: create one"""
    if request.method == 'POST':
        return _property_create(request)

    properties = Property.active.filter(user=request.user)

    status = request.GET.get('status', '')
    if status:
        properties = properties.filter(status=status)

    return json_list(properties)


def _property_create(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = PropertyForm(payload, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    property_obj = form.save(commit=False)
    property_obj.user = request.user
    property_obj.save()
    logger.info(f"Property created: {property_obj.name} (ID: {property_obj.pk}, user: {request.user.pk})")
    return JsonResponse(property_obj.to_dict(), status=201)


@login_required_json
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
def property_detail(request, pk):
    """GET / PUT (partial) / DELETE a single property"""
    property_obj = Property.active.filter(pk=pk, user=request.user).first()
    if property_obj is None:
        return not_found('Property')

    if request.method == 'GET':
        return JsonResponse(property_obj.to_dict())

    if request.method == 'DELETE':
        property_obj.soft_delete()
        return JsonResponse({'message': 'Property removed'})

    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    data = merged_form_data(PropertyForm, property_obj, payload)
    form = PropertyForm(data, instance=property_obj, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    property_obj = form.save()
    return JsonResponse(property_obj.to_dict())


@login_required_json
@require_GET
def property_summary(request, pk):
    """
    Financial summary of one property (property detail view)

    Query params:
        months: trailing month buckets (default RENTBOOK_SUMMARY_MONTHS)
    """
    property_obj = Property.active.filter(pk=pk, user=request.user).first()
    if property_obj is None:
        return not_found('Property')

    try:
        months = parse_months(request.GET.get('months'), settings.RENTBOOK_SUMMARY_MONTHS)
    except ValueError as e:
        return json_error(str(e))

    transactions = Transaction.active.filter(
        user=request.user, property=property_obj
    ).with_relations()
    summary = summarize(records_from_queryset(transactions), timezone.localdate(), months=months)

    return JsonResponse({
        'property': property_obj.to_summary_dict(),
        'summary': summary.as_dict(),
    })
