import logging

from django.conf import settings
from django.http import HttpResponse, JsonResponse
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
from apps.properties.models import Property
from .forms import MortgageForm, SummaryFilterForm, TransactionForm, TransactionListFilterForm
from .models import Mortgage, Transaction
from .summary import build_matcher, summarize
from .utils import XLSX_CONTENT_TYPE, build_summary_filter, export_transactions_to_excel

logger = logging.getLogger(__name__)


# ============================================================
# Transaction CRUD
# ============================================================

@login_required_json
@require_http_methods(['GET', 'POST'])
def transaction_list(request):
    """
    GET: the user's transactions, newest first / POST: create one

    Query params (GET):
        type: income | expense
        start_date, end_date: inclusive date range (both or neither)
        year, month: one calendar month (both or neither)
    """
    if request.method == 'POST':
        return _transaction_create(request)

    form = TransactionListFilterForm(request.GET)
    if not form.is_valid():
        return form_error_response(form)

    transactions = form.apply(Transaction.active.filter(user=request.user)).with_relations()
    return json_list(transactions)


def _transaction_create(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = TransactionForm(payload, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    transaction = form.save(commit=False)
    transaction.user = request.user
    transaction.save()
    logger.info(
        f"Transaction created: {transaction.tx_type} {transaction.amount} "
        f"(ID: {transaction.pk}, user: {request.user.pk})"
    )
    return JsonResponse(transaction.to_dict(), status=201)


@login_required_json
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
def transaction_detail(request, pk):
    """GET / PUT (partial) / DELETE a single transaction"""
    transaction = Transaction.active.with_relations().filter(pk=pk, user=request.user).first()
    if transaction is None:
        return not_found('Transaction')

    if request.method == 'GET':
        return JsonResponse(transaction.to_dict())

    if request.method == 'DELETE':
        transaction.soft_delete()
        logger.info(f"Transaction deleted (ID: {transaction.pk}, user: {request.user.pk})")
        return JsonResponse({'message': 'Transaction removed'})

    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    data = merged_form_data(TransactionForm, transaction, payload)
    form = TransactionForm(data, instance=transaction, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    transaction = form.save()
    return JsonResponse(transaction.to_dict())


@login_required_json
@require_GET
def transactions_by_property(request, property_id):
    """Transactions of one property"""
    if not Property.objects.filter(pk=property_id, user=request.user).exists():
        return not_found('Property')

    transactions = Transaction.active.filter(
        user=request.user, property_id=property_id
    ).with_relations()
    return json_list(transactions)


@login_required_json
@require_GET
def transactions_by_category(request, category):
    """Transactions of one category label"""
    transactions = Transaction.active.filter(
        user=request.user, category__iexact=category
    ).with_relations()
    return json_list(transactions)


# ============================================================
# Financial summary / export
# ============================================================

def _filtered_summary(request, default_months):
    """
    Shared by summary and export.

    Returns (form, transactions, summary); summary is None when the query
    string does not validate.
    """
    form = SummaryFilterForm(request.GET)
    if not form.is_valid():
        return form, [], None

    summary_filter = build_summary_filter(form.cleaned_data)
    months = form.cleaned_data.get('months') or default_months
    today = timezone.localdate()

    matches = build_matcher(today, summary_filter)
    pairs = [(tx, tx.to_record()) for tx in Transaction.active.filter(user=request.user).with_relations()]
    pairs = [(tx, record) for tx, record in pairs if matches(record)]

    summary = summarize([record for _, record in pairs], today, months=months)
    return form, [tx for tx, _ in pairs], summary


@login_required_json
@require_GET
def financial_summary(request):
    """
    Income/expense summary of the user's transactions

    Query params:
        search: text matched against description, category and property name
        type: income | expense | all
        property: property id | all
        date_range: all | this_month | last_month | this_year | last_30_days | last_90_days
        months: trailing month buckets (default RENTBOOK_SUMMARY_MONTHS)
    """
    form, rows, summary = _filtered_summary(request, settings.RENTBOOK_SUMMARY_MONTHS)
    if summary is None:
        return form_error_response(form)

    data = summary.as_dict()
    data['count'] = len(rows)
    return JsonResponse(data)


@login_required_json
@require_GET
def transaction_export(request):
    """Filtered transactions + summary as an Excel download"""
    form, rows, summary = _filtered_summary(request, settings.RENTBOOK_SUMMARY_MONTHS)
    if summary is None:
        return form_error_response(form)

    excel_file = export_transactions_to_excel(rows, summary)
    timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')

    filename = f"transactions_{request.user.username}_{timestamp}.xlsx"
    response = HttpResponse(excel_file.read(), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


# ============================================================
# Mortgage CRUD
# ============================================================

@login_required_json
@require_http_methods(['GET', 'POST'])
def mortgage_list(request):
    if request.method == 'POST':
        return _mortgage_create(request)

    mortgages = Mortgage.active.filter(user=request.user).select_related('property')
    return json_list(mortgages)


def _mortgage_create(request):
    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    form = MortgageForm(payload, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    mortgage = form.save(commit=False)
    mortgage.user = request.user
    mortgage.save()
    logger.info(f"Mortgage created: {mortgage.lender} (ID: {mortgage.pk}, user: {request.user.pk})")
    return JsonResponse(mortgage.to_dict(), status=201)


@login_required_json
@require_http_methods(['GET', 'PUT', 'PATCH', 'DELETE'])
def mortgage_detail(request, pk):
    mortgage = Mortgage.active.select_related('property').filter(pk=pk, user=request.user).first()
    if mortgage is None:
        return not_found('Mortgage')

    if request.method == 'GET':
        return JsonResponse(mortgage.to_dict())

    if request.method == 'DELETE':
        mortgage.soft_delete()
        return JsonResponse({'message': 'Mortgage removed'})

    try:
        payload = parse_body(request)
    except BadJSON as e:
        return json_error(str(e))

    data = merged_form_data(MortgageForm, mortgage, payload)
    form = MortgageForm(data, instance=mortgage, user=request.user)
    if not form.is_valid():
        return form_error_response(form)

    mortgage = form.save()
    return JsonResponse(mortgage.to_dict())
