"""
scoring/catalog.py

Operator CRUD on the event catalog.

The catalog is a plain dict of event name → base points, owned by the
caller and mutated in place. Rename and delete also rewrite the attendance
records of every subject so no record points at a missing name because of
a rename, and no record survives the deletion of its event.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List

import structlog

from perf_tracker.core.exceptions import DuplicateEventError, NotFoundError
from perf_tracker.models.subject import EventDefinition, Subject

logger = structlog.get_logger(__name__)

Catalog = Dict[str, float]


def coerce_points(value: Any) -> float:
    """
    Coerce operator input to a point value; invalid literals become 0.

    Accepts ints, floats, Decimals and numeric strings. None, NaN,
    infinities and unparseable strings fall back to 0.0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, Decimal)):
        points = float(value)
    else:
        try:
            points = float(Decimal(str(value).strip()))
        except (InvalidOperation, ValueError):
            points = math.nan

    if math.isnan(points) or math.isinf(points):
        logger.warning("event_points_coerced", raw_value=repr(value), points=0.0)
        return 0.0
    return points


def catalog_from_definitions(definitions: Iterable[EventDefinition]) -> Catalog:
    """Build a catalog from EventDefinitions, rejecting repeated names."""
    catalog: Catalog = {}
    for definition in definitions:
        add_event(catalog, definition.name, definition.base_points)
    return catalog


def list_events(catalog: Catalog) -> List[EventDefinition]:
    return [EventDefinition(name=name, base_points=points) for name, points in catalog.items()]


def add_event(catalog: Catalog, name: str, base_points: Any) -> None:
    """Add an event. Raises DuplicateEventError if the name exists."""
    if name in catalog:
        raise DuplicateEventError(name)
    catalog[name] = coerce_points(base_points)
    logger.info("event_added", name=name, base_points=catalog[name])


def rename_event(
    catalog: Catalog,
    subjects: Iterable[Subject],
    old_name: str,
    new_name: str,
) -> None:
    """
    Rename an event in the catalog and in every subject's records.

    Raises:
        NotFoundError: old_name is not in the catalog.
        DuplicateEventError: new_name already names another event.
    """
    if old_name not in catalog:
        raise NotFoundError("Event", old_name)
    if new_name == old_name:
        return
    if new_name in catalog:
        raise DuplicateEventError(new_name)

    # Rebuild to keep the event's position in the catalog
    renamed = [(new_name if name == old_name else name, points) for name, points in catalog.items()]
    catalog.clear()
    catalog.update(renamed)

    records_updated = 0
    for subject in subjects:
        for record in subject.records:
            if record.event_name == old_name:
                record.event_name = new_name
                records_updated += 1

    logger.info(
        "event_renamed",
        old_name=old_name,
        new_name=new_name,
        records_updated=records_updated,
    )


def delete_event(catalog: Catalog, subjects: Iterable[Subject], name: str) -> None:
    """Hard-delete an event and strip its records from every subject. Idempotent."""
    existed = name in catalog
    catalog.pop(name, None)

    records_removed = 0
    for subject in subjects:
        kept = [r for r in subject.records if r.event_name != name]
        records_removed += len(subject.records) - len(kept)
        subject.records[:] = kept

    logger.info(
        "event_deleted",
        name=name,
        existed=existed,
        records_removed=records_removed,
    )


def update_event_points(catalog: Catalog, name: str, new_points: Any) -> None:
    """Replace an event's base points. Raises NotFoundError if absent."""
    if name not in catalog:
        raise NotFoundError("Event", name)
    previous = catalog[name]
    catalog[name] = coerce_points(new_points)
    logger.info(
        "event_points_updated",
        name=name,
        previous_points=previous,
        base_points=catalog[name],
    )
