"""HTML rendering helpers for the search page and its results fragment."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from vehicle_search.domain.url_state import page_url
from vehicle_search.domain.vehicle import SortOption

TEMPLATES_DIR = Path(__file__).parent / "templates"

SORT_LABELS: dict[SortOption, str] = {
    SortOption.RELEVANCE: "Relevance",
    SortOption.PRICE_ASC: "Price: Low to High",
    SortOption.PRICE_DESC: "Price: High to Low",
}

# Characters that can end a <script> element or break a JavaScript string
_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_SCRIPT_ESCAPE_TABLE = str.maketrans(_SCRIPT_ESCAPES)


def safe_serialize(payload: Any) -> str:
    """
    Serialize to JSON that is safe to embed inside a <script> element.

    json.dumps leaves '<', '>', '&' and the JavaScript line/paragraph
    separators untouched; each is replaced by its \\uXXXX escape, which
    JSON.parse decodes back to the same character.
    """
    return json.dumps(payload, ensure_ascii=False).translate(_SCRIPT_ESCAPE_TABLE)


def format_price(price: Decimal | str) -> str:
    """Display format for prices: $25,000 or $25,000.50."""
    amount = Decimal(price)
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def _script_json(payload: Any) -> Markup:
    # Output is already escaped for the script context
    return Markup(safe_serialize(payload))


def build_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["price"] = format_price
    templates.env.filters["script_json"] = _script_json
    templates.env.globals["page_url"] = page_url
    templates.env.globals["sort_labels"] = SORT_LABELS
    return templates


templates = build_templates()
