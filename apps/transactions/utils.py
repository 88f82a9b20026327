import logging
from io import BytesIO

import openpyxl
from django.conf import settings
from openpyxl.styles import Font

from .summary import EXPENSE, INCOME, SummaryFilter, normalize_date_range

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def parse_months(value, default):
    """
    'months' query parameter as an int within 1..RENTBOOK_MAX_SUMMARY_MONTHS

    Raises ValueError on anything else.
    """
    if value in (None, ''):
        return default
    try:
        months = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"months must be an integer, got {value!r}")
    if not 1 <= months <= settings.RENTBOOK_MAX_SUMMARY_MONTHS:
        raise ValueError(f"months must be between 1 and {settings.RENTBOOK_MAX_SUMMARY_MONTHS}")
    return months


def records_from_queryset(queryset):
    """Transaction rows -> aggregator records (select_related('property') first)"""
    return [tx.to_record() for tx in queryset]


def build_summary_filter(cleaned_data):
    """SummaryFilterForm.cleaned_data -> SummaryFilter"""
    tx_type = cleaned_data.get('type') or None
    return SummaryFilter(
        property_id=cleaned_data.get('property') or None,
        date_range=normalize_date_range(cleaned_data.get('date_range')),
        search=cleaned_data.get('search') or '',
        tx_type=None if tx_type == 'all' else tx_type,
    )


def export_transactions_to_excel(transactions, summary):
    """
    Filtered transactions + their summary as an xlsx workbook

    Sheets:
        Transactions: one row per transaction
        Summary: totals, category/property breakdowns, monthly buckets
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Transactions"

    headers = ['Date', 'Property', 'Type', 'Category', 'Description',
               'Payment Method', 'Amount', 'Notes']
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    count = 0
    for tx in transactions:
        ws.append([
            tx.date.strftime('%Y-%m-%d') if tx.date else '',
            tx.get_property_display(),
            tx.get_tx_type_display(),
            tx.category or '',
            tx.description or '',
            tx.payment_method or '',
            # float for Excel compatibility
            float(tx.amount) if tx.amount is not None else 0,
            tx.notes or '',
        ])
        count += 1

    _write_summary_sheet(wb.create_sheet("Summary"), summary)

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    logger.info(f"Exported {count} transaction(s) to Excel")
    return output


def _write_summary_sheet(ws, summary):
    bold = Font(bold=True)

    def heading(text):
        ws.append([])
        ws.append([text])
        ws.cell(row=ws.max_row, column=1).font = bold

    ws.append(['Total Income', float(summary.total_income)])
    ws.append(['Total Expenses', float(summary.total_expenses)])
    ws.append(['Net Cash Flow', float(summary.net_cash_flow)])

    for tx_type, title in ((INCOME, 'Income by Category'), (EXPENSE, 'Expenses by Category')):
        heading(title)
        for category, amount in sorted(summary.by_category[tx_type].items()):
            ws.append([category, float(amount)])

    heading('By Property')
    ws.append(['Property', 'Income', 'Expenses', 'Net'])
    for name, totals in sorted(summary.by_property.items()):
        ws.append([name, float(totals.income), float(totals.expenses), float(totals.net)])

    heading('By Month')
    ws.append(['Month', 'Income', 'Expenses', 'Profit'])
    for bucket in summary.by_month:
        ws.append([bucket.label, float(bucket.income), float(bucket.expenses), float(bucket.profit)])
