"""
Dashboard

No models of its own; aggregates properties, transactions and maintenance
requests of the signed-in user.
"""
import logging

from django.conf import settings
from django.db.models import Count
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from apps.core.decorators import login_required_json
from apps.maintenance.models import MaintenanceRequest
from apps.properties.models import Property
from apps.transactions.models import Transaction
from apps.transactions.summary import summarize
from apps.transactions.utils import records_from_queryset

logger = logging.getLogger(__name__)


def _status_counts(queryset):
    rows = queryset.values('status').annotate(count=Count('id')).order_by('status')
    return {row['status']: row['count'] for row in rows}


@login_required_json
@require_GET
def dashboard(request):
    """
    Summary cards + charts

    - property count and status distribution
    - maintenance request status distribution
    - this month's income/expenses/net cash flow
    - trailing RENTBOOK_DASHBOARD_MONTHS months of income/expenses
    """
    user = request.user
    today = timezone.localdate()

    properties = Property.active.filter(user=user)
    maintenance_requests = MaintenanceRequest.active.filter(user=user)

    records = records_from_queryset(Transaction.active.filter(user=user).with_relations())
    trend = summarize(records, today, months=settings.RENTBOOK_DASHBOARD_MONTHS)
    this_month = trend.by_month[-1]

    recent = Transaction.active.filter(user=user).with_relations()[:5]

    return JsonResponse({
        'property_count': properties.count(),
        'property_status': _status_counts(properties),
        'maintenance_status': _status_counts(maintenance_requests),
        'open_maintenance_count': maintenance_requests.filter(status__in=['Open', 'In Progress']).count(),
        'monthly': {
            'income': this_month.income,
            'expenses': this_month.expenses,
            'net_cash_flow': this_month.profit,
        },
        'monthly_trend': [
            {
                'label': bucket.label,
                'income': bucket.income,
                'expenses': bucket.expenses,
                'profit': bucket.profit,
            }
            for bucket in trend.by_month
        ],
        'recent_transactions': [tx.to_dict() for tx in recent],
    })
