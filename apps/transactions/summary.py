"""
Financial summary aggregation

Derives income/expense/net cash flow figures from a flat list of dated,
typed transaction records, grouped by category, property and trailing
calendar month. The dashboard, the financial summary endpoint and the
property detail summary all go through summarize().

Rules:
    - amounts are magnitudes; the sign comes from the type
    - a missing amount counts as 0
    - a record without a readable date still counts in the totals, but not
      in month buckets or in an active date range
    - a missing category lands in the "Uncategorized" bucket
    - a missing property lands in the "Unassigned" bucket
    - records sharing a property id share one property entry, named after
      the first display name known for that id
    - "now" is always passed in, nothing here reads the clock

Nothing in this module touches the database; see utils.records_from_queryset
for the ORM side.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

INCOME = 'income'
EXPENSE = 'expense'
TX_TYPES = (INCOME, EXPENSE)

UNASSIGNED = 'Unassigned'
UNCATEGORIZED = 'Uncategorized'

ZERO = Decimal('0.00')

DATE_RANGE_ALL = 'all'
DATE_RANGE_CHOICES = [
    ('all', 'All time'),
    ('this_month', 'This month'),
    ('last_month', 'Last month'),
    ('this_year', 'This year'),
    ('last_30_days', 'Last 30 days'),
    ('last_90_days', 'Last 90 days'),
]

# Keys sent by the web client
DATE_RANGE_ALIASES = {
    'thisMonth': 'this_month',
    'lastMonth': 'last_month',
    'thisYear': 'this_year',
    'last30Days': 'last_30_days',
    'last90Days': 'last_90_days',
}

MONTH_ABBR = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


# ============================================================
# Value coercion
# ============================================================

def to_amount(value) -> Decimal:
    """Amount as a non-negative Decimal (2 places); missing or unreadable -> 0"""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite():
            return ZERO
        return abs(amount).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        return ZERO


def to_date(value) -> Optional[date]:
    """
    Calendar date of a record, or None when missing/unparseable.

    Timestamps keep the calendar date they were written with; no timezone
    conversion happens here.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _as_date(now) -> date:
    return now.date() if isinstance(now, datetime) else now


def _clean_label(value) -> Optional[str]:
    if value is None:
        return None
    label = str(value).strip()
    return label or None


# ============================================================
# Records and results
# ============================================================

@dataclass(frozen=True)
class TransactionRecord:
    """One transaction as seen by the aggregator"""
    amount: Optional[Decimal]
    tx_type: str
    date: Optional[date]
    category: Optional[str] = None
    property_id: Optional[str] = None
    property_name: Optional[str] = None
    tenant_id: Optional[str] = None
    description: str = ''

    @classmethod
    def from_dict(cls, data: Mapping) -> 'TransactionRecord':
        """
        Build a record from a plain JSON-like mapping.

        The property may be an id or a mapping with 'id'/'_id' and 'name'
        (the populated shape the API returns). Never raises on bad values.
        """
        prop = data.get('property')
        property_id = None
        property_name = None
        if isinstance(prop, Mapping):
            property_id = prop.get('id', prop.get('_id'))
            property_name = _clean_label(prop.get('name'))
        elif prop not in (None, ''):
            property_id = prop
        if property_name is None:
            property_name = _clean_label(data.get('property_name'))

        tenant = data.get('tenant')
        if isinstance(tenant, Mapping):
            tenant = tenant.get('id', tenant.get('_id'))

        tx_type = data.get('type', data.get('tx_type'))

        return cls(
            amount=to_amount(data.get('amount')),
            tx_type=str(tx_type or '').strip().lower(),
            date=to_date(data.get('date')),
            category=_clean_label(data.get('category')),
            property_id=None if property_id in (None, '') else str(property_id),
            property_name=property_name,
            tenant_id=None if tenant in (None, '') else str(tenant),
            description=str(data.get('description') or ''),
        )


@dataclass(frozen=True)
class SummaryFilter:
    """Predicates applied before aggregation; all active ones are ANDed"""
    property_id: Optional[str] = None
    date_range: str = DATE_RANGE_ALL
    search: str = ''
    tx_type: Optional[str] = None


@dataclass(frozen=True)
class PropertyTotals:
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class MonthBucket:
    year: int
    month: int
    label: str
    income: Decimal
    expenses: Decimal
    profit: Decimal


@dataclass(frozen=True)
class FinancialSummary:
    total_income: Decimal
    total_expenses: Decimal
    net_cash_flow: Decimal
    by_category: Dict[str, Dict[str, Decimal]]
    by_property: Dict[str, PropertyTotals]
    by_month: List[MonthBucket]

    def as_dict(self):
        """JSON-ready shape (Decimals are left to the JSON encoder)"""
        return {
            'total_income': self.total_income,
            'total_expenses': self.total_expenses,
            'net_cash_flow': self.net_cash_flow,
            'by_category': {
                INCOME: dict(self.by_category[INCOME]),
                EXPENSE: dict(self.by_category[EXPENSE]),
            },
            'by_property': {
                name: {'income': totals.income, 'expenses': totals.expenses, 'net': totals.net}
                for name, totals in self.by_property.items()
            },
            'by_month': [
                {
                    'year': bucket.year,
                    'month': bucket.month,
                    'label': bucket.label,
                    'income': bucket.income,
                    'expenses': bucket.expenses,
                    'profit': bucket.profit,
                }
                for bucket in self.by_month
            ],
        }


# ============================================================
# Helpers
# ============================================================

def resolve_property_name(record: TransactionRecord, property_names: Optional[Mapping] = None) -> str:
    """Display name: name looked up by id, then the record's own name, then the id, then 'Unassigned'"""
    if record.property_id and property_names:
        name = property_names.get(record.property_id)
        if name:
            return name
    if record.property_name:
        return record.property_name
    if record.property_id:
        return record.property_id
    return UNASSIGNED


def collect_property_names(records: Iterable[TransactionRecord],
                           property_names: Optional[Mapping] = None) -> Dict[str, str]:
    """
    {property id: display name} from the given mapping, completed with the
    first name any record carries for an id the mapping lacks
    """
    names = {str(key): value for key, value in (property_names or {}).items() if value}
    for record in records:
        if record.property_id and record.property_name:
            names.setdefault(record.property_id, record.property_name)
    return names


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def trailing_months(now, count: int) -> List[Tuple[int, int]]:
    """(year, month) of the `count` most recent months including now's, oldest first"""
    today = _as_date(now)
    return [shift_month(today.year, today.month, -offset) for offset in range(count - 1, -1, -1)]


def normalize_date_range(kind) -> str:
    if not kind:
        return DATE_RANGE_ALL
    return DATE_RANGE_ALIASES.get(kind, kind)


def date_range_bounds(kind, now) -> Tuple[Optional[date], Optional[date]]:
    """
    Inclusive (start, end) dates of a date range preset.

    'last_month' is the whole previous calendar month; every other preset
    runs from its start date through today. 'all' has no bounds.
    """
    kind = normalize_date_range(kind)
    today = _as_date(now)

    if kind == DATE_RANGE_ALL:
        return None, None
    if kind == 'this_month':
        return today.replace(day=1), today
    if kind == 'last_month':
        end = today.replace(day=1) - timedelta(days=1)
        return end.replace(day=1), end
    if kind == 'this_year':
        return date(today.year, 1, 1), today
    if kind == 'last_30_days':
        return today - timedelta(days=30), today
    if kind == 'last_90_days':
        return today - timedelta(days=90), today

    raise ValueError(f"Unknown date range: {kind}")


def _matches_search(record: TransactionRecord, search: str) -> bool:
    for text in (record.description, record.category, record.property_name):
        if text and search in text.lower():
            return True
    return False


def build_matcher(now, summary_filter: Optional[SummaryFilter] = None) -> Callable[[TransactionRecord], bool]:
    """Predicate that is True when a record passes every active filter"""
    if summary_filter is None:
        return lambda record: True

    start, end = date_range_bounds(summary_filter.date_range, now)
    search = (summary_filter.search or '').strip().lower()
    tx_type = summary_filter.tx_type if summary_filter.tx_type not in (None, '', 'all') else None
    property_id = summary_filter.property_id
    if property_id in (None, '', 'all'):
        property_id = None
    else:
        property_id = str(property_id)

    def matches(record):
        if search and not _matches_search(record, search):
            return False
        if tx_type and record.tx_type != tx_type:
            return False
        if property_id and record.property_id != property_id:
            return False
        if start is not None:
            if record.date is None or not (start <= record.date <= end):
                return False
        return True

    return matches


def filter_records(records: Iterable[TransactionRecord], now,
                   summary_filter: Optional[SummaryFilter] = None) -> List[TransactionRecord]:
    """Single pass over the records; every active predicate must hold"""
    matches = build_matcher(now, summary_filter)
    return [record for record in records if matches(record)]


# ============================================================
# Aggregation
# ============================================================

def summarize(records: Iterable[TransactionRecord], now, months: int = 12,
              summary_filter: Optional[SummaryFilter] = None,
              property_names: Optional[Mapping] = None) -> FinancialSummary:
    """
    Totals, category/property partitions and trailing-month buckets.

    Args:
        records: TransactionRecord items, any order
        now: reference date (date or datetime) for presets and month buckets
        months: number of trailing month buckets (6 on the dashboard, 12 elsewhere)
        summary_filter: optional predicates applied first
        property_names: optional {property id: display name} for records
            that only carry an id
    """
    selected = filter_records(records, now, summary_filter)
    names = collect_property_names(selected, property_names)
    window = trailing_months(now, months)
    buckets = {key: {INCOME: ZERO, EXPENSE: ZERO} for key in window}

    totals = {INCOME: ZERO, EXPENSE: ZERO}
    by_category = {INCOME: {}, EXPENSE: {}}
    by_property = {}
    skipped = 0

    for record in selected:
        tx_type = record.tx_type
        if tx_type not in TX_TYPES:
            skipped += 1
            continue

        amount = to_amount(record.amount)
        totals[tx_type] += amount

        category = record.category or UNCATEGORIZED
        by_category[tx_type][category] = by_category[tx_type].get(category, ZERO) + amount

        name = resolve_property_name(record, names)
        row = by_property.setdefault(name, {INCOME: ZERO, EXPENSE: ZERO})
        row[tx_type] += amount

        if record.date is not None:
            bucket = buckets.get((record.date.year, record.date.month))
            if bucket is not None:
                bucket[tx_type] += amount

    if skipped:
        logger.debug(f"Skipped {skipped} record(s) with an unknown transaction type")

    return FinancialSummary(
        total_income=totals[INCOME],
        total_expenses=totals[EXPENSE],
        net_cash_flow=totals[INCOME] - totals[EXPENSE],
        by_category=by_category,
        by_property={
            name: PropertyTotals(income=row[INCOME], expenses=row[EXPENSE], net=row[INCOME] - row[EXPENSE])
            for name, row in by_property.items()
        },
        by_month=[
            MonthBucket(
                year=year,
                month=month,
                label=f"{MONTH_ABBR[month - 1]} {year}",
                income=buckets[(year, month)][INCOME],
                expenses=buckets[(year, month)][EXPENSE],
                profit=buckets[(year, month)][INCOME] - buckets[(year, month)][EXPENSE],
            )
            for year, month in window
        ],
    )
