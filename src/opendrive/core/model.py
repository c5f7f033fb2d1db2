"""Declarative element classes.

Every OpenDRIVE element is an `attrs` class deriving from `XmlElement`, whose
fields are declared with the helpers below:

* `attribute` -- an XML attribute, converted by a codec (see `opendrive.core.values`);
* `child` -- an optional or required child element;
* `children` -- a repeated child element, optionally non-empty (`Sequence1`);
* `text` -- character data of the element;
* `additional_data` -- the `AdditionalData` bucket receiving unknown children.

Passing a mapping from element names to classes instead of a single name and
class declares a tagged variant: the value is an instance of one of the classes,
and the element name is chosen by the value's class when writing.

Attributes are written in declaration order; children are written in declaration
order with the additional data last. Elements without an `additional_data` field
have a closed content model: unknown children are skipped.
"""

import attr

from opendrive.core.errors import AttributeMissing, ChildMissing, OpenDriveWriteError
from opendrive.core.events import Characters, EndElement, EventReader, StartElement
from opendrive.core.parser import Arm, ReadContext, dispatch_children
from opendrive.core.sequences import Sequence1
from opendrive.core.values import STRING, codec_for

_METADATA_KEY = "opendrive"

## Field specifications


@attr.s(frozen=True, slots=True)
class AttributeSpec:
    name: str = attr.ib()
    codec = attr.ib()
    required: bool = attr.ib()


@attr.s(frozen=True, slots=True)
class ChildSpec:
    #: Mapping from element names to element classes.
    variants: dict = attr.ib()
    many: bool = attr.ib()
    required: bool = attr.ib()

    @property
    def is_variant(self):
        return len(self.variants) > 1

    def name_for(self, value):
        for name, type_ in self.variants.items():
            if type(value) is type_:
                return name
        for name, type_ in self.variants.items():
            if isinstance(value, type_):
                return name
        expected = ", ".join(type_.__name__ for type_ in self.variants.values())
        raise OpenDriveWriteError(
            f"cannot write {type(value).__name__} value (expected {expected})"
        )


@attr.s(frozen=True, slots=True)
class TextSpec:
    pass


@attr.s(frozen=True, slots=True)
class ExtensionSpec:
    pass


def _variants(name, type_):
    if isinstance(name, dict):
        return dict(name)
    if type_ is None:
        raise TypeError(f"no element class given for {name!r}")
    return {name: type_}


def attribute(name, codec=STRING, *, required=True):
    """Declare an XML attribute; optional attributes default to `None`."""
    spec = AttributeSpec(name, codec_for(codec), required)
    if required:
        return attr.ib(metadata={_METADATA_KEY: spec})
    return attr.ib(default=None, metadata={_METADATA_KEY: spec})


def child(name, type_=None, *, required=False):
    """Declare a single child element; optional children default to `None`."""
    spec = ChildSpec(_variants(name, type_), many=False, required=required)
    if required:
        return attr.ib(metadata={_METADATA_KEY: spec})
    return attr.ib(default=None, metadata={_METADATA_KEY: spec})


def children(name, type_=None, *, non_empty=False):
    """Declare a repeated child element.

    Non-empty children are stored in a `Sequence1` and must be given explicitly
    (any non-empty iterable is accepted, also on assignment); others default to
    an empty list.
    """
    spec = ChildSpec(_variants(name, type_), many=True, required=non_empty)
    if non_empty:
        return attr.ib(
            converter=Sequence1.coerce,
            on_setattr=attr.setters.convert,
            metadata={_METADATA_KEY: spec},
        )
    return attr.ib(factory=list, metadata={_METADATA_KEY: spec})


def text():
    """Declare the character data of an element."""
    return attr.ib(default="", metadata={_METADATA_KEY: TextSpec()})


def additional_data():
    """Declare the bucket for extension data and unknown child elements."""
    from opendrive.core.additional_data import AdditionalData

    return attr.ib(factory=AdditionalData, metadata={_METADATA_KEY: ExtensionSpec()})


_fieldCache = {}


def xml_fields(cls):
    """The ``(field name, spec)`` pairs of an element class, in declaration order."""
    fields = _fieldCache.get(cls)
    if fields is None:
        fields = tuple(
            (field.name, field.metadata[_METADATA_KEY])
            for field in attr.fields(cls)
            if _METADATA_KEY in field.metadata
        )
        _fieldCache[cls] = fields
    return fields


## Emission


def emit_element(name, value, visitor):
    """Emit the events of a complete element through the visitor."""
    value.emit_attributes(lambda attributes: visitor(StartElement(name, attributes)))
    value.emit_children(visitor)
    visitor(EndElement(name))


## Base class


class XmlElement:
    """Base class for OpenDRIVE elements declared with the field helpers above."""

    @classmethod
    def from_context(cls, read):
        """Parse an element from the `ReadContext` positioned on it."""
        values = {}
        arms = []
        variantSlots = []
        fallback = None
        textField = None
        for fieldName, spec in xml_fields(cls):
            if isinstance(spec, ChildSpec):
                if spec.many:
                    slot = values[fieldName] = []
                    consume = slot.append
                else:
                    values[fieldName] = None
                    consume = _setter(values, fieldName)
                singleRequired = spec.required and not spec.is_variant
                for name, type_ in spec.variants.items():
                    arms.append(
                        Arm(name, type_.from_context, consume, required=singleRequired)
                    )
                if spec.required and spec.is_variant:
                    variantSlots.append((fieldName, spec))
            elif isinstance(spec, ExtensionSpec):
                bucket = values[fieldName] = _new_bucket()
                fallback = bucket.absorb
            elif isinstance(spec, TextSpec):
                textField = fieldName

        dispatch_children(read, arms, fallback)

        for fieldName, spec in variantSlots:
            if values[fieldName] is None or values[fieldName] == []:
                raise ChildMissing(
                    cls.__name__, alternatives=tuple(spec.variants), path=read.path
                )
        for fieldName, spec in xml_fields(cls):
            if isinstance(spec, ChildSpec) and spec.many and spec.required:
                values[fieldName] = Sequence1(values[fieldName])
        if textField is not None:
            values[textField] = read.text

        for fieldName, spec in xml_fields(cls):
            if isinstance(spec, AttributeSpec):
                value = read.attribute_opt(spec.name, spec.codec)
                if value is None and spec.required:
                    value = cls.missing_attribute(read, spec.name)
                values[fieldName] = value
        return cls(**values)

    @classmethod
    def missing_attribute(cls, read, name):
        """Called when a required attribute is absent; may return a substitute."""
        raise AttributeMissing(name, path=read.path)

    @classmethod
    def from_xml_fragment(cls, text, options=None):
        """Parse a standalone XML fragment whose root is this element."""
        document = ReadContext.for_document(EventReader(text.strip()), options)
        results = []
        document.children(lambda name, context: results.append(cls.from_context(context)))
        return results[0]

    def xml_attributes(self):
        """The attributes of this element as ``(name, text)`` pairs."""
        attributes = []
        for fieldName, spec in xml_fields(type(self)):
            if not isinstance(spec, AttributeSpec):
                continue
            value = getattr(self, fieldName)
            if value is None:
                if spec.required:
                    raise OpenDriveWriteError(
                        f"{type(self).__name__} is missing required attribute {spec.name!r}"
                    )
                continue
            attributes.append((spec.name, spec.codec.format(value)))
        return attributes

    def emit_attributes(self, visitor):
        visitor(self.xml_attributes())

    def emit_children(self, visitor):
        bucket = None
        for fieldName, spec in xml_fields(type(self)):
            value = getattr(self, fieldName)
            if isinstance(spec, ChildSpec):
                if spec.many:
                    items = value
                elif value is None:
                    if spec.required:
                        raise OpenDriveWriteError(
                            f"{type(self).__name__} is missing required child "
                            + "/".join(spec.variants)
                        )
                    continue
                else:
                    items = (value,)
                for item in items:
                    emit_element(spec.name_for(item), item, visitor)
            elif isinstance(spec, TextSpec):
                if value is not None:
                    visitor(Characters(value))
            elif isinstance(spec, ExtensionSpec):
                bucket = value
        if bucket is not None:
            bucket.emit_children(visitor)


def _setter(values, fieldName):
    def consume(value):
        values[fieldName] = value

    return consume


def _new_bucket():
    from opendrive.core.additional_data import AdditionalData

    return AdditionalData()
