# -*- coding: utf-8 -*-
"""Rollback utilities for removing a generated house.

Every element built by the house command carries a tag
``AUTO_HOUSE:<KIND>:<TIMESTAMP>``, e.g. ``AUTO_HOUSE:WALL:20261019_143022``.
Instances keep it in Comments; the roof reference plane, which has no
Comments, keeps it as its Name. This module finds those elements and
deletes them.

Example:
    >>> from rollback_utils import find_tagged_elements, delete_elements
    >>> tagged = find_tagged_elements(doc)
    >>> count = delete_elements(doc, tagged)
"""
import re
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pyrevit import DB

from utils_revit import get_logger, tx


DEFAULT_TAG_PREFIX = "AUTO_HOUSE"


def tag_pattern(prefix: str = DEFAULT_TAG_PREFIX):
    """Regex for PREFIX:KIND:TIMESTAMP, kind and timestamp optional."""
    return re.compile(
        r"^(" + re.escape(prefix) + r")(?::([A-Z_]+))?(?::(\d{8}_\d{6}))?$",
        re.IGNORECASE
    )


TAG_PATTERN = tag_pattern()


def parse_tag(comment: Optional[str],
              prefix: str = DEFAULT_TAG_PREFIX) -> Optional[Dict[str, Optional[str]]]:
    """Parse AUTO_HOUSE tag from element comment.

    Returns:
        Dictionary with 'prefix', 'tool', 'timestamp' keys if valid tag,
        None otherwise.

    Examples:
        >>> parse_tag("AUTO_HOUSE:ROOF:20261019_143022")
        {'prefix': 'AUTO_HOUSE', 'tool': 'ROOF', 'timestamp': '20261019_143022'}
        >>> parse_tag("Some other comment")
    """
    if not comment:
        return None

    pattern = TAG_PATTERN if prefix == DEFAULT_TAG_PREFIX else tag_pattern(prefix)
    match = pattern.match(comment.strip())
    if not match:
        return None

    return {
        "prefix": match.group(1),
        "tool": match.group(2),
        "timestamp": match.group(3),
    }


def make_timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime("%Y%m%d_%H%M%S")


def generate_tag(tool_name: str, timestamp: Optional[str] = None,
                 prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Generate a tag for element comments.

    Examples:
        >>> generate_tag("ROOF", timestamp="20261019_143022")
        'AUTO_HOUSE:ROOF:20261019_143022'
    """
    tool_name = tool_name.upper().replace(" ", "_")
    return "{}:{}:{}".format(prefix, tool_name, timestamp or make_timestamp())


def _tag_of(elem) -> Optional[str]:
    if isinstance(elem, DB.ReferencePlane):
        return getattr(elem, "Name", None)
    p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
    if p is None:
        return None
    return p.AsString()


def find_tagged_elements(doc, prefix: str = DEFAULT_TAG_PREFIX) -> List:
    """Find instances whose Comments carry a house tag and tagged reference planes.

    Args:
        doc: Revit document to search.
        prefix: Tag prefix searched for.
    """
    if doc is None:
        return []

    # Parameter filter keeps the scan inside Revit
    provider = DB.ParameterValueProvider(
        DB.ElementId(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
    )
    rule = DB.FilterStringRule(provider, DB.FilterStringContains(), prefix)
    collector = (
        DB.FilteredElementCollector(doc)
        .WhereElementIsNotElementType()
        .WherePasses(DB.ElementParameterFilter(rule))
    )

    planes = DB.FilteredElementCollector(doc).OfClass(DB.ReferencePlane)
    return [
        elem for elem in list(collector) + list(planes)
        if parse_tag(_tag_of(elem), prefix=prefix)
    ]


def get_unique_tools(doc, prefix: str = DEFAULT_TAG_PREFIX) -> List[Tuple[str, int]]:
    """Return (kind, count) pairs of tagged elements, most frequent first."""
    counts: Dict[str, int] = {}
    for elem in find_tagged_elements(doc, prefix=prefix):
        parsed = parse_tag(_tag_of(elem), prefix=prefix)
        tool = (parsed or {}).get("tool") or "UNKNOWN"
        tool = tool.upper()
        counts[tool] = counts.get(tool, 0) + 1
    return sorted(counts.items(), key=lambda x: (-x[1], x[0]))


def delete_elements(doc, elements: List, transaction_name: str = "Undo AUTO_HOUSE") -> int:
    """Delete elements in one transaction.

    Hosted doors and windows vanish with their walls; they are counted from
    the ids Revit reports as deleted and not deleted a second time.

    Returns:
        Number of the given elements that are gone afterwards.
    """
    if doc is None or not elements:
        return 0

    element_ids = [elem.Id for elem in elements if getattr(elem, "Id", None) is not None]
    if not element_ids:
        return 0

    logger = get_logger()
    removed = set()
    with tx(transaction_name, doc=doc):
        for eid in element_ids:
            if eid in removed or doc.GetElement(eid) is None:
                continue
            removed.update(doc.Delete(eid) or [eid])
    deleted = len(removed.intersection(element_ids))
    logger.info(u'Deleted {0} tagged elements'.format(deleted))
    return deleted


def delete_all(doc, prefix: str = DEFAULT_TAG_PREFIX) -> int:
    """Delete every element carrying a house tag."""
    return delete_elements(doc, find_tagged_elements(doc, prefix=prefix), "Delete All {}".format(prefix))
