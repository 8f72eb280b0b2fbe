"""Document base schema and the reference/resolved duality.

Every stored record extends :class:`Document`. A record that points at another
linkable record holds either a :class:`Reference` (identifier only) or the
fully populated record; :data:`Resolvable` expresses that choice once for any
target model.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)

from heritage.schemas.enums import RecordKind
from heritage.typeguards.predicates import is_unresolved

LinkShape = Literal["one", "list", "map", "map_list"]


@dataclass(frozen=True)
class LinkSpec:
    """Describes one field of a record that points at another record kind.

    Attributes:
        kind: Kind of the record the field points at.
        shape: How references are held: a single value (``one``), a list
            (``list``), a related map (``map``) or a related map of lists
            (``map_list``).
    """

    kind: RecordKind
    shape: LinkShape = "one"


class Document(BaseModel):
    """Base model for any record saved in a collection.

    The identifier is exposed as ``id`` and travels on the wire as ``_id``.
    Non-string identifiers (e.g. BSON ObjectIds) are stored as their string form.

    Examples:
        >>> Document.model_validate({"_id": "5f3e"}).id
        '5f3e'
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    # Fields that hold references to other records, keyed by wire path.
    linked_fields: ClassVar[dict[str, LinkSpec]] = {}

    id: str = Field(
        ...,
        alias="_id",
        min_length=1,
        description="Identifier, unique within the record's collection",
        examples=["5f3e1c2a9b1e8a3d4c5b6a7f"],
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: Any) -> Any:
        """Store ObjectId-like identifiers as strings."""
        if v is not None and not isinstance(v, str):
            return str(v)
        return v


class Reference(Document):
    """A record reduced to its identifier.

    Stands in for a record that has not been fetched. Keys holding ``None`` are
    dropped, matching ``is_unresolved``; any other key besides ``_id`` is rejected.

    Examples:
        >>> Reference(id="p1").model_dump(by_alias=True)
        {'_id': 'p1'}
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def drop_null_keys(cls, data: Any) -> Any:
        """Treat null-valued keys as absent."""
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


def _resolution_state(value: Any) -> str:
    return "reference" if is_unresolved(value) else "resolved"


ResolvedT = TypeVar("ResolvedT", bound=Document)

# Either the populated record or a bare reference to it, chosen by
# is_unresolved. A partial record is validated as the resolved model.
Resolvable = Annotated[
    Union[
        Annotated[ResolvedT, Tag("resolved")],
        Annotated[Reference, Tag("reference")],
    ],
    Discriminator(_resolution_state),
]
