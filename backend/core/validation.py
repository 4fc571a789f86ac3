from typing import Any, Dict, Iterable, List

from schemas.inventory import Violation

FIELD_MESSAGES: Dict[str, str] = {
    "name": "Name is required",
    "type": "Invalid product type",
    "description": "Description is required",
    "abv": "ABV must be a positive number",
    "volume": "Volume must be a positive number",
    "package": "Invalid package type",
    "price": "Price must be a positive number",
    "cost": "Cost must be a positive number",
    "stockQuantity": "Stock quantity must be a non-negative integer",
    "reorderPoint": "Reorder point must be a non-negative integer",
    "isActive": "isActive must be a boolean",
    "tasteProfile": "Invalid taste profile",
    "quantity": "Quantity must be an integer",
}


def _field_of(loc: Iterable[Any]) -> str:
    # FastAPI prefixes request locations with "body", "path", ...
    parts = [p for p in loc if isinstance(p, str)]
    if parts and parts[0] in ("body", "path", "query", "header"):
        parts = parts[1:]
    return parts[0] if parts else "body"


def collect_violations(errors: Iterable[Dict[str, Any]]) -> List[Violation]:
    """Turn pydantic error dicts into one violation per field, in order."""
    violations: List[Violation] = []
    seen = set()
    for err in errors:
        field = _field_of(err.get("loc", ()))
        if field in seen:
            continue
        seen.add(field)
        message = FIELD_MESSAGES.get(field) or err.get("msg") or "Invalid value"
        violations.append(Violation(field=field, message=message))
    return violations

