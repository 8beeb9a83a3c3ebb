# logic/view.py
"""
Table view state and projection.

The table is driven by an immutable ``TableView`` (search text, per-column
filters, sort). Each UI change builds a new view and the table is recomputed
with ``project(records, view)``; nothing is mutated in place.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .records import FIELD_LABELS, TaxRecord


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    accessor: Callable[[TaxRecord], Any]
    numeric: bool = False


def _attr(name: str) -> Callable[[TaxRecord], Any]:
    return lambda r: getattr(r, name)


def _column(key: str, numeric: bool = False) -> Column:
    return Column(key=key, label=FIELD_LABELS[key], accessor=_attr(key), numeric=numeric)


# Display order of the records table
COLUMNS: Tuple[Column, ...] = (
    _column("status"),
    _column("aging_days", numeric=True),
    _column("business_type"),
    _column("branch_code"),
    _column("document_date"),
    _column("posting_date"),
    _column("debt_doc_no"),
    _column("period"),
    _column("payment_doc_no"),
    _column("payment_date"),
    _column("tax_invoice_no"),
    _column("vendor_name"),
    _column("vendor_tax_id"),
    _column("tax_base", numeric=True),
    _column("input_vat", numeric=True),
    _column("product_value", numeric=True),
)
COLUMNS_BY_KEY: Dict[str, Column] = {c.key: c for c in COLUMNS}

# Global search also matches the urgency tier
SEARCH_ACCESSORS: Tuple[Callable[[TaxRecord], Any], ...] = tuple(c.accessor for c in COLUMNS) + (
    _attr("urgency"),
)


@dataclass(frozen=True)
class TableView:
    search: str = ""
    column_filters: Tuple[Tuple[str, str], ...] = ()
    sort_key: Optional[str] = "aging_days"
    descending: bool = True


def display_text(value: Any) -> str:
    """Text used for matching: 1000.0 -> '1000', 12.5 -> '12.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_column(key: str) -> Column:
    try:
        return COLUMNS_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown table column: {key!r}") from None


def with_search(view: TableView, text: str) -> TableView:
    return replace(view, search=text)


def with_filter(view: TableView, key: str, text: str) -> TableView:
    get_column(key)
    others = tuple((k, v) for k, v in view.column_filters if k != key)
    if not text:
        return replace(view, column_filters=others)
    return replace(view, column_filters=others + ((key, text),))


def toggle_sort(view: TableView, key: str) -> TableView:
    """Clicking the same column while ascending flips to descending; anything else sorts ascending."""
    get_column(key)
    if view.sort_key == key and not view.descending:
        return replace(view, descending=True)
    return replace(view, sort_key=key, descending=False)


def _matches_search(record: TaxRecord, needle: str) -> bool:
    return any(needle in display_text(acc(record)).lower() for acc in SEARCH_ACCESSORS)


def _matches_filters(record: TaxRecord, filters: Sequence[Tuple[Column, str]]) -> bool:
    return all(text in display_text(col.accessor(record)).lower() for col, text in filters)


def project(records: Sequence[TaxRecord], view: TableView) -> List[TaxRecord]:
    needle = view.search.lower()
    filters = [(get_column(k), v.lower()) for k, v in view.column_filters if v]

    rows = [
        r for r in records
        if (not needle or _matches_search(r, needle)) and _matches_filters(r, filters)
    ]

    if view.sort_key:
        accessor = get_column(view.sort_key).accessor
        rows = sorted(rows, key=accessor, reverse=view.descending)
    return rows
