"""
Boundary validation for uploaded or generated self map documents.

A document is a JSON object with array-typed `entries` and `associations`. Anything
else is rejected wholesale; no partial data is ever returned.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .errors import DanglingReferenceError, DuplicateLabelError, SelfMapValidationError
from .models import Association, Entry, SelfMapData

logger = logging.getLogger(__name__)

LENIENT = "lenient"
STRICT = "strict"
DANGLING_POLICIES = (LENIENT, STRICT)


def parse_document(payload: Any, dangling_policy: str = LENIENT) -> SelfMapData:
    """
    Validate a decoded JSON document and convert it into SelfMapData.

    Inputs:
        payload: Decoded JSON (normally a dict).
        dangling_policy: "lenient" keeps associations whose endpoints are unknown (they are
                         skipped downstream); "strict" rejects the document.

    Outputs:
        SelfMapData with frozen Entry/Association records.

    Raises:
        SelfMapValidationError: Missing or non-array top-level fields, malformed records.
        DuplicateLabelError: Two entries share a label.
        DanglingReferenceError: Unknown endpoints under the strict policy.
    """

    if dangling_policy not in DANGLING_POLICIES:
        raise SelfMapValidationError(f"Unknown dangling policy: {dangling_policy!r}")
    if not isinstance(payload, dict):
        raise SelfMapValidationError("Invalid data structure: expected a JSON object.")

    missing = [name for name in ("entries", "associations") if name not in payload]
    if missing:
        raise SelfMapValidationError(f"Invalid data structure: missing fields {', '.join(missing)}.")
    for name in ("entries", "associations"):
        if not isinstance(payload[name], list):
            raise SelfMapValidationError(f"Invalid data structure: '{name}' must be an array.")

    entries = tuple(_parse_entry(raw, index) for index, raw in enumerate(payload["entries"]))
    associations = tuple(
        _parse_association(raw, index) for index, raw in enumerate(payload["associations"])
    )

    duplicates = [label for label, count in Counter(e.label for e in entries).items() if count > 1]
    if duplicates:
        raise DuplicateLabelError(duplicates)

    dangling = find_dangling_associations(entries, associations)
    if dangling:
        if dangling_policy == STRICT:
            raise DanglingReferenceError((a.src, a.dst) for a in dangling)
        logger.warning("Skipping %d association(s) with unknown endpoints", len(dangling))

    return SelfMapData(entries=entries, associations=associations)


def find_dangling_associations(
    entries: Iterable[Entry],
    associations: Iterable[Association],
) -> List[Association]:
    known = {entry.label for entry in entries}
    return [assoc for assoc in associations if assoc.src not in known or assoc.dst not in known]


def loads_document(text: str, dangling_policy: str = LENIENT) -> SelfMapData:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SelfMapValidationError(f"Failed to parse JSON file: {exc}") from exc
    return parse_document(payload, dangling_policy=dangling_policy)


def load_document(path: Union[str, Path], dangling_policy: str = LENIENT) -> SelfMapData:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    return loads_document(path.read_text(encoding="utf-8"), dangling_policy=dangling_policy)


def _parse_entry(raw: Any, index: int) -> Entry:
    record = _require_object(raw, "entries", index)
    label = _require_str(record, "label", "entries", index)
    category = _require_str(record, "category", "entries", index)
    power, valence = (_require_number(record, name, "entries", index) for name in ("power", "valence"))
    return Entry(label=label, category=category, power=power, valence=valence)


def _parse_association(raw: Any, index: int) -> Association:
    record = _require_object(raw, "associations", index)
    src = _require_str(record, "src", "associations", index)
    dst = _require_str(record, "dst", "associations", index)
    relation = record.get("relation") or "associates_with"
    if not isinstance(relation, str):
        raise SelfMapValidationError(f"associations[{index}].relation must be a string.")
    weight = record.get("weight")
    if weight is None:
        weight = 1.0
    elif not _is_number(weight):
        raise SelfMapValidationError(f"associations[{index}].weight must be a number.")
    return Association(src=src, dst=dst, relation=relation, weight=float(weight))


def _require_object(raw: Any, field: str, index: int) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise SelfMapValidationError(f"{field}[{index}] must be an object.")
    return raw


def _require_str(record: Dict[str, Any], name: str, field: str, index: int) -> str:
    value = record.get(name)
    if not isinstance(value, str) or not value:
        raise SelfMapValidationError(f"{field}[{index}].{name} must be a non-empty string.")
    return value


def _require_number(record: Dict[str, Any], name: str, field: str, index: int) -> float:
    value = record.get(name)
    if not _is_number(value):
        raise SelfMapValidationError(f"{field}[{index}].{name} must be a number.")
    return float(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
