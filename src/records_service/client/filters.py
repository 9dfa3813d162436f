"""
Client-side record filtering

Lists are fetched whole; search and the equality filters run locally over
the camelCase records.
"""

from typing import Any, Dict, Iterable, List, Optional

# area -> fields matched by the free-text search
SEARCH_FIELDS: Dict[str, List[str]] = {
    "cases": ["caseNumber", "title", "description", "location", "assignedOfficer"],
    "evidence": ["evidenceNumber", "description", "location"],
    "geofiles": ["filename", "description", "address"],
    "reports": ["reportNumber", "title", "content"],
    "license-plates": ["plateNumber", "ownerName", "idNumber"],
    "ob-entries": ["description", "obNumber", "reportedBy"],
    "officers": ["firstName", "lastName", "badgeNumber", "department", "position", "email"],
}

# area -> fields accepted as equality filters
FILTER_FIELDS: Dict[str, List[str]] = {
    "cases": ["status", "priority"],
    "evidence": ["type", "status"],
    "geofiles": ["fileType"],
    "reports": ["type", "status"],
    "license-plates": [],
    "ob-entries": ["type"],
    "officers": ["department"],
}

# equality filters compared without regard to case
CASE_INSENSITIVE_FILTERS = {("ob-entries", "type")}


def _is_unset(value: Any) -> bool:
    return value is None or value == "" or value == "all"


def matches_search(record: Dict[str, Any], term: str, fields: Iterable[str]) -> bool:
    needle = term.lower()
    for name in fields:
        value = record.get(name)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_records(
    area: str,
    records: Iterable[Dict[str, Any]],
    search: Optional[str] = None,
    filters: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Apply the area's search and equality filters

    Args:
        area: Feature area path, e.g. "cases" or "license-plates"
        records: Records as returned by the API
        search: Case-insensitive substring, matched against the area's search fields
        filters: Field -> wanted value. Empty, None or "all" disables a filter.

    Returns:
        Matching records in their original order

    Raises:
        KeyError: If a filter names a field the area does not filter on
    """
    result = list(records)

    if search:
        fields = SEARCH_FIELDS[area]
        result = [r for r in result if matches_search(r, search, fields)]

    for name, wanted in (filters or {}).items():
        if name not in FILTER_FIELDS[area]:
            raise KeyError(f"{area} cannot be filtered by {name}")
        if _is_unset(wanted):
            continue
        if (area, name) in CASE_INSENSITIVE_FILTERS:
            wanted = str(wanted).lower()
            result = [r for r in result if str(r.get(name) or "").lower() == wanted]
        else:
            result = [r for r in result if r.get(name) == wanted]

    return result
