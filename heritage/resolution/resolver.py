"""Depth-bounded resolution of references.

The resolver rebuilds a record so that every linked field is itself resolved
one level shallower, until the remaining depth reaches zero, below which
linked fields are reduced to bare references. Bare references are expanded
through an external lookup; the resolver never talks to storage itself.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel

from heritage.common.config import get_config
from heritage.common.tracing import TracingContext, build_resolution_trace
from heritage.resolution.depth import clamp_depth, decrement_depth, is_exhausted
from heritage.schemas.document import Document, LinkSpec, Reference
from heritage.schemas.enums import RecordKind
from heritage.schemas.registry import MODEL_REGISTRY, model_for
from heritage.schemas.related_map import map_related
from heritage.typeguards.classifier import classify
from heritage.typeguards.predicates import defined_fields, document_id, is_unresolved

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """Raised when a record cannot be resolved consistently."""

    pass


class RecordLookup(Protocol):
    """Identifier-to-record lookup supplied by the storage layer.

    Returns the stored payload, or None when no record with that identifier exists.
    """

    def __call__(self, kind: RecordKind, record_id: str) -> Mapping[str, Any] | None: ...


def to_reference(value: Any) -> Reference:
    """Reduce any record, resolved or not, to its reference.

    Raises:
        ResolutionError: If ``value`` carries no identifier.
    """
    record_id = document_id(value)
    if record_id is None:
        raise ResolutionError(f"Cannot reference a {type(value).__name__} without _id")
    return Reference(id=record_id)


def _as_wire(value: Any) -> dict[str, Any] | None:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, Mapping):
        return dict(value)
    return None


class Resolver:
    """Rebuilds records with nested references expanded up to a bounded depth.

    Example:
        >>> resolver = Resolver(lookup=store.find, default_depth=2)
        >>> person = resolver.resolve(RecordKind.PERSON, {"_id": "p1"})
    """

    def __init__(self, lookup: RecordLookup | None = None, default_depth: int | None = None) -> None:
        """Initialize the resolver.

        Args:
            lookup: Lookup used to expand bare references. Without one, bare
                references stay references.
            default_depth: Depth used when ``resolve`` is called without one.
                Defaults to HERITAGE_RESOLUTION_DEPTH from config.
        """
        if default_depth is None:
            default_depth = get_config().resolution_depth
        self.lookup = lookup
        self.default_depth = clamp_depth(default_depth)

    def resolve(self, kind: RecordKind, payload: Any, depth: int | None = None) -> Document:
        """Resolve ``payload`` as a record of ``kind``.

        Args:
            kind: Kind of the record.
            payload: Wire payload or model instance, resolved or a bare reference.
            depth: Remaining depth; linked fields are resolved at ``depth - 1``
                while ``depth > 0`` and kept as references once it is 0.
                Clamped to ``0..MAX_RESOLUTION_DEPTH``.

        Returns:
            Document: The resolved model, or a ``Reference`` when a bare
            reference could not be expanded.

        Raises:
            ResolutionError: If ``kind`` has no model, the payload is not a
                record, or the lookup returns a record with a different identifier.
            pydantic.ValidationError: If a resolved payload lacks required fields.
        """
        if kind not in MODEL_REGISTRY:
            raise ResolutionError(f"No model for record kind {kind.value!r}")
        remaining = clamp_depth(self.default_depth if depth is None else depth)
        with TracingContext():
            return self._resolve(kind, payload, remaining)

    def resolve_payload(self, payload: Any, depth: int | None = None) -> Document:
        """Classify ``payload`` and resolve it as the kind it carries.

        A bare reference has no recognisable kind and is returned as a ``Reference``.

        Raises:
            ResolutionError: If the payload matches no known record signature.
        """
        kind, _ = classify(payload)
        if kind is RecordKind.UNKNOWN:
            raise ResolutionError("Payload matches no known record signature")
        if kind is RecordKind.REFERENCE:
            return to_reference(payload)
        return self.resolve(kind, payload, depth)

    def _resolve(self, kind: RecordKind, payload: Any, depth: int) -> Document:
        record = _as_wire(payload)
        if record is None:
            raise ResolutionError(f"Cannot resolve {type(payload).__name__} as {kind.value}")

        if is_unresolved(record):
            fetched = self._fetch(kind, str(record["_id"]), depth)
            if fetched is None:
                return to_reference(record)
            record = fetched

        model = model_for(kind)
        for path, link in model.linked_fields.items():
            record = self._rebuild(record, path.split("."), link, depth)

        return model.model_validate(record)

    def _fetch(self, kind: RecordKind, record_id: str, depth: int) -> dict[str, Any] | None:
        trace = build_resolution_trace(kind=kind.value, record_id=record_id, depth=depth)

        if self.lookup is None:
            logger.debug("No lookup configured, keeping reference", extra=trace)
            return None

        fetched = _as_wire(self.lookup(kind, record_id))
        if fetched is None:
            logger.debug("Lookup returned no record, keeping reference", extra=trace)
            return None

        fetched_id = document_id(fetched)
        if fetched_id != record_id:
            raise ResolutionError(
                f"Lookup for {kind.value} {record_id!r} returned record {fetched_id!r}"
            )

        logger.debug("Expanded reference", extra=trace)
        return fetched

    def _rebuild(
        self,
        record: dict[str, Any],
        path: list[str],
        link: LinkSpec,
        depth: int,
    ) -> dict[str, Any]:
        head, *rest = path
        value = record.get(head)
        if value is None:
            return record

        if rest:
            nested = _as_wire(value)
            if nested is None:
                return record
            return {**record, head: self._rebuild(nested, rest, link, depth)}

        return {**record, head: self._rebuild_value(value, link, depth)}

    def _rebuild_value(self, value: Any, link: LinkSpec, depth: int) -> Any:
        if link.shape == "one":
            return self._link(link.kind, value, depth)
        # Wrong container; model validation reports it.
        if link.shape == "list" and not isinstance(value, list):
            return value
        if link.shape in ("map", "map_list") and not isinstance(value, Mapping):
            return value
        if link.shape == "list":
            return [self._link(link.kind, item, depth) for item in value]
        if link.shape == "map":
            return map_related(value, lambda item: self._link(link.kind, item, depth))
        as_list = LinkSpec(link.kind, "list")
        return map_related(value, lambda items: self._rebuild_value(items, as_list, depth))

    def _link(self, kind: RecordKind, value: Any, depth: int) -> Any:
        # Not a record at all; leave it for model validation to report.
        if defined_fields(value) is None:
            return value

        if not is_exhausted(depth):
            return self._resolve(kind, value, decrement_depth(depth))

        if not is_unresolved(value):
            logger.debug(
                "Depth exhausted, reducing to reference",
                extra=build_resolution_trace(kind=kind.value, record_id=document_id(value), depth=0),
            )
        return to_reference(value)
