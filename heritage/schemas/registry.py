"""Mapping from record kind to the model that validates it."""

from heritage.schemas.annotation import Annotation
from heritage.schemas.core import Address, Contact, Institution, Person, Tag
from heritage.schemas.document import Document, Reference
from heritage.schemas.entity import Compilation, Entity
from heritage.schemas.enums import RecordKind
from heritage.schemas.metadata import DigitalEntity, PhysicalEntity
from heritage.schemas.users import Group

MODEL_REGISTRY: dict[RecordKind, type[Document]] = {
    RecordKind.REFERENCE: Reference,
    RecordKind.ANNOTATION: Annotation,
    RecordKind.COMPILATION: Compilation,
    RecordKind.ENTITY: Entity,
    RecordKind.GROUP: Group,
    RecordKind.DIGITAL_ENTITY: DigitalEntity,
    RecordKind.PHYSICAL_ENTITY: PhysicalEntity,
    RecordKind.PERSON: Person,
    RecordKind.INSTITUTION: Institution,
    RecordKind.ADDRESS: Address,
    RecordKind.CONTACT: Contact,
    RecordKind.TAG: Tag,
}


def model_for(kind: RecordKind) -> type[Document]:
    """Return the model class for ``kind``.

    Raises:
        KeyError: If ``kind`` has no model (``RecordKind.UNKNOWN``).
    """
    return MODEL_REGISTRY[kind]
