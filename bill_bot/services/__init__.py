"""
Services Package.

Business logic shared by the HTTP routes.
"""

from .billing import (
    EmptyOrderError,
    GenericBill,
    UnrecognizedOrderError,
    build_generic_bill,
    clear_llm_cache,
    create_bill,
    daily_report,
    generate_menu_bill,
    get_bill,
    list_bills,
    load_catalog,
)

__all__ = [
    "EmptyOrderError",
    "GenericBill",
    "UnrecognizedOrderError",
    "build_generic_bill",
    "clear_llm_cache",
    "create_bill",
    "daily_report",
    "generate_menu_bill",
    "get_bill",
    "list_bills",
    "load_catalog",
]
