from typing import Any, Dict, List, Optional


def get_embedded_list(payload: Dict[str, Any], relation: str) -> List[Dict[str, Any]]:
    """
    Extracts an embedded collection (e.g. _embedded.workspaces) as a list of dicts.
    Missing or malformed collections come back empty.
    """
    if not payload or not isinstance(payload.get("_embedded"), dict):
        return []
    items = payload["_embedded"].get(relation)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def id_segment_from_href(href: Optional[str]) -> Optional[str]:
    """
    Extracts the trailing identifier segment from a RESTful URL.
    Example: '/api/v3/onefuse/workspaces/2/' -> '2'
    """
    if not href:
        return None
    segments = [s for s in href.split("?")[0].split("/") if s]
    return segments[-1] if segments else None


__all__ = [
    "get_embedded_list",
    "id_segment_from_href",
]
