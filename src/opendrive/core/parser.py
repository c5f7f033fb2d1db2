"""Parse contexts and child dispatch.

A `ReadContext` is a cursor over one open element of the event stream: it
knows the element's name, its attributes, its path from the document root, and
how to visit its children. Each child is handed to its own sub-context sharing
the same event iterator; once a handler returns, whatever the handler did not
consume of the child is skipped so the outer element stays in step.

Element names are compared case-insensitively, as are attribute names.
"""

import logging

from opendrive.core.errors import (
    AttributeMissing,
    ElementMissing,
    InvalidEnumValue,
    OpenDriveParseError,
    ParseError,
    XmlError,
)
from opendrive.core.events import Characters, EndElement, StartElement
from opendrive.core.options import DEFAULT_OPTIONS
from opendrive.core.values import STRING, codec_for

log = logging.getLogger(__name__)


def names_match(expected, actual):
    return expected.casefold() == actual.casefold()


class ReadContext:
    """Cursor over the currently-open element.

    Args:
        events: Iterator of XML events (see `EventReader`), positioned just after
            this element's start event.
        name (str): Local name of the element, or `None` for the document itself.
        attributes: The element's attributes as ``(name, value)`` pairs.
        parent (ReadContext): Context of the enclosing element, if any.
        options (ParseOptions): Parsing options, inherited by sub-contexts.
    """

    def __init__(self, events, name=None, attributes=(), parent=None, options=None):
        self._events = events
        self.name = name
        self.parent = parent
        if options is None:
            options = parent.options if parent else DEFAULT_OPTIONS
        self.options = options
        self._attributes = list(attributes)
        #: Character data directly inside this element (only complete once the
        #: children have been consumed).
        self.text = ""
        self._finished = False

    @classmethod
    def for_document(cls, events, options=None):
        return cls(events, options=options)

    @property
    def path(self):
        names = []
        context = self
        while context is not None:
            if context.name is not None:
                names.append(context.name)
            context = context.parent
        return "/".join(reversed(names))

    @property
    def finished(self):
        return self._finished

    ## Attributes

    def _raw_attribute(self, name):
        for key, value in self._attributes:
            if names_match(name, key):
                return value
        return None

    def _coerce(self, name, text, codec):
        try:
            return codec.parse(text)
        except InvalidEnumValue as e:
            e.path = self.path
            e.attribute = name
            raise
        except OpenDriveParseError as e:
            if e.path is None:
                e.path = self.path
            raise
        except (ValueError, OverflowError) as e:
            raise ParseError(name, codec.kind, text, path=self.path) from e

    def attribute(self, name, codec=STRING):
        """Value of a required attribute.

        Args:
            name (str): Attribute name.
            codec: A `Codec`, a builtin type (`int`, `float`, `bool`, `str`), or a
                class implementing ``from_xml``.

        Raises:
            `AttributeMissing`: if the attribute is absent.
            `ParseError`: if a primitive value is malformed.
            `InvalidEnumValue`: if an enumerated value is unknown.
        """
        text = self._raw_attribute(name)
        if text is None:
            raise AttributeMissing(name, path=self.path)
        return self._coerce(name, text, codec_for(codec))

    def attribute_opt(self, name, codec=STRING):
        """Like `attribute`, but returns `None` if the attribute is absent."""
        text = self._raw_attribute(name)
        if text is None:
            return None
        return self._coerce(name, text, codec_for(codec))

    def attributes(self):
        """Iterator over the raw ``(name, value)`` pairs of this element."""
        return iter(self._attributes)

    ## Children

    def children(self, handler):
        """Visit the child elements of this element.

        Calls ``handler(name, context)`` for each child start element, with a new
        sub-context scoped to the child, and consumes events until the end of this
        element. Character data is accumulated in `text`; other events are ignored.
        """
        if self._finished:
            return
        for event in self._events:
            if isinstance(event, StartElement):
                child = ReadContext(
                    self._events, event.name, event.attributes, parent=self
                )
                handler(event.name, child)
                child.skip()
            elif isinstance(event, Characters):
                self.text += event.text
            elif isinstance(event, EndElement):
                self._finished = True
                return
        self._finished = True
        if self.name is not None:
            raise XmlError("unexpected end of document", path=self.path)

    def subtree(self):
        """Iterate over the remaining events inside this element.

        Nested elements are reported as plain events rather than sub-contexts, so
        content of any depth can be consumed without recursion. The end event of
        this element itself is not reported. The iterator must be exhausted.
        """
        if self._finished:
            return
        depth = 0
        for event in self._events:
            if isinstance(event, StartElement):
                depth += 1
            elif isinstance(event, Characters):
                if depth == 0:
                    self.text += event.text
            elif isinstance(event, EndElement):
                if depth == 0:
                    self._finished = True
                    return
                depth -= 1
            yield event
        self._finished = True
        if self.name is not None:
            raise XmlError("unexpected end of document", path=self.path)

    def skip(self):
        """Consume the rest of this element, including any nested elements."""
        for _ in self.subtree():
            pass

    def expecting_no_child_elements_for(self, value):
        """Skip the content of a leaf element and return the given value."""
        self.skip()
        return value


## Dispatch


class Arm:
    """One arm of a child dispatch.

    Args:
        name (str): Element name matched (case-insensitively) by this arm.
        parse: Function building a value from a `ReadContext`.
        consume: Function receiving the parsed value.
        required (bool): Whether the element must occur at least once.
    """

    __slots__ = ("name", "parse", "consume", "required", "fired")

    def __init__(self, name, parse, consume, required=False):
        self.name = name
        self.parse = parse
        self.consume = consume
        self.required = required
        self.fired = False


def dispatch_children(read, arms, fallback=None):
    """Route the children of an element to the matching arms.

    Children are matched against the arms in order. A child matching no arm is
    passed to ``fallback(name, context)`` if given, and skipped otherwise.

    Raises:
        `ElementMissing`: if a required arm matched no child.
    """

    def handler(name, context):
        for arm in arms:
            if names_match(arm.name, name):
                arm.consume(arm.parse(context))
                arm.fired = True
                return
        if fallback is not None:
            fallback(name, context)
        else:
            log.debug("skipping unknown element %s", context.path)

    read.children(handler)
    for arm in arms:
        if arm.required and not arm.fired:
            raise ElementMissing(arm.name, path=read.path)
