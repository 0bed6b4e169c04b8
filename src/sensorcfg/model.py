"""
Core Configuration Model Objects

Defines the in-memory form of a sensor parser configuration.

These are pure data classes representing:
    - Field transformation kinds
    - Field transformers (one transformation step each)
    - Sensor parser configurations (root container)

ARCHITECTURAL RULE:
    Only the field transformation list is strongly typed.
    Every other key of the document is carried opaquely so that
    a parse/serialize cycle never loses configuration the editor
    does not understand.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


STELLAR_TRANSFORMATION_CLASS = "org.apache.metron.common.field.transformation.StellarTransformation"


class FieldTransformationKind(Enum):
    """
    Known field transformation kinds.

    The value is the tag written in the document. A document may also
    name a kind by its implementation class, so matching goes through
    `matches()` rather than plain string equality.

    Only STELLAR is edited by this package. The others are listed so they
    can be recognised, never touched.
    """

    STELLAR = "STELLAR"
    REMOVE = "REMOVE"
    IP_PROTOCOL = "IP_PROTOCOL"

    @property
    def mapping_class(self) -> str:
        return _MAPPING_CLASSES[self]

    def matches(self, tag: Optional[str]) -> bool:
        """
        True if a document tag names this kind.

        Accepts the enum name in any case or the fully qualified
        implementation class name.
        """
        if tag is None:
            return False
        return tag.upper() == self.value or tag == self.mapping_class


_MAPPING_CLASSES = {
    FieldTransformationKind.STELLAR: STELLAR_TRANSFORMATION_CLASS,
    FieldTransformationKind.REMOVE: "org.apache.metron.common.field.transformation.RemoveTransformation",
    FieldTransformationKind.IP_PROTOCOL: "org.apache.metron.common.field.transformation.IPProtocolTransformation",
}


@dataclass(frozen=True)
class FieldTransformer:
    """
    One entry of the `fieldTransformations` list.

    Properties:
        transformation:
            Kind tag as written in the document (e.g. "STELLAR").
            None if the entry has no tag.

        config:
            Ordered mapping of field name -> expression text.
            Insertion order is the order fields are printed and
            the order of the derived output list.

        output:
            Ordered list of produced field names, or None when the
            entry does not declare one. For the Stellar entry this is
            always recomputed from config after an edit.

        extras:
            Any other keys of the entry (e.g. "input"), in document order.

        source:
            The entry exactly as read from the document, or None for an
            entry created by the editor. Gives the key order and the keys
            present when the entry is written back.

    IMPORTANT:
        This object is immutable (frozen=True).
        Edits build a new FieldTransformer and put it back by index.
    """

    transformation: Optional[str] = None
    config: Dict[str, Any] = field(default_factory=dict)
    output: Optional[List[str]] = None
    extras: Dict[str, Any] = field(default_factory=dict)
    source: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)

    def is_kind(self, kind: FieldTransformationKind) -> bool:
        return kind.matches(self.transformation)

    @property
    def is_stellar(self) -> bool:
        return self.is_kind(FieldTransformationKind.STELLAR)


@dataclass
class SensorParserConfig:
    """
    Root container for a sensor parser configuration.

    Properties:
        field_transformations:
            Ordered transformation steps (wire key "fieldTransformations").
            Order is significant and preserved across edits.

        fields:
            Every other top-level key, in document order, untouched.

        transformations_position:
            Index of the "fieldTransformations" key among the top-level
            keys of the source document, or None if it was absent.
            The list is written back at the same place.

    INVARIANTS:
        - At most one Stellar entry is canonical: the last one in list order
        - A document is parsed fresh for every operation and discarded after
    """

    field_transformations: List[FieldTransformer] = field(default_factory=list)
    fields: Dict[str, Any] = field(default_factory=dict)
    transformations_position: Optional[int] = None

