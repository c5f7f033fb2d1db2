"""Random generation of element trees.

`arbitrary` builds a random, valid value of any element class from its field
declarations, for use in round-trip tests. Every required attribute and child is
filled in; optional content is included at random until the nesting depth runs
out. Generic `Element` trees are given names that no OpenDRIVE element uses, so
they are read back into the same bucket they were generated in.
"""

import random
import string

from opendrive.core.additional_data import (
    AdditionalData,
    DataQuality,
    Element,
    Include,
    UserData,
)
from opendrive.core.model import (
    AttributeSpec,
    ChildSpec,
    ExtensionSpec,
    TextSpec,
    xml_fields,
)
from opendrive.core.sequences import Sequence1
from opendrive.core.values import arbitrary_text

DEFAULT_DEPTH = 6
#: Upper bound on the length of generated repeated children.
MAX_REPEAT = 3


def arbitrary(cls, rng=None, depth=DEFAULT_DEPTH):
    """Generate a random value of the given element class.

    Args:
        cls: An `XmlElement` subclass, or one of `AdditionalData` and `Element`.
        rng (random.Random): Source of randomness; a fresh one if not given.
        depth (int): Nesting depth below which optional content is omitted.
    """
    if rng is None:
        rng = random.Random()
    if cls is AdditionalData:
        return arbitrary_additional_data(rng, depth)
    if cls is Element:
        return arbitrary_element(rng, depth)
    if cls is UserData:
        return UserData(
            code=arbitrary_text(rng),
            value=_maybe(rng, depth, lambda: arbitrary_text(rng)),
            elements=_some(rng, depth, lambda: arbitrary_element(rng, depth - 1)),
        )

    values = {}
    for fieldName, spec in xml_fields(cls):
        if isinstance(spec, AttributeSpec):
            if spec.required or rng.random() < 0.5:
                values[fieldName] = spec.codec.arbitrary(rng)
            else:
                values[fieldName] = None
        elif isinstance(spec, ChildSpec):
            values[fieldName] = _arbitrary_children(spec, rng, depth)
        elif isinstance(spec, TextSpec):
            values[fieldName] = arbitrary_text(rng)
        elif isinstance(spec, ExtensionSpec):
            values[fieldName] = arbitrary_additional_data(rng, depth - 1)
    return cls(**values)


def _arbitrary_children(spec, rng, depth):
    variants = list(spec.variants.values())

    def one():
        return arbitrary(rng.choice(variants), rng, depth - 1)

    if spec.many:
        count = rng.randint(0, MAX_REPEAT) if depth > 0 else 0
        if spec.required:
            return Sequence1(one() for _ in range(max(count, 1)))
        return [one() for _ in range(count)]
    if spec.required:
        return one()
    return _maybe(rng, depth, one)


def _maybe(rng, depth, make):
    if depth > 0 and rng.random() < 0.5:
        return make()
    return None


def _some(rng, depth, make):
    if depth <= 0:
        return []
    return [make() for _ in range(rng.randint(0, MAX_REPEAT))]


## Extension data


def arbitrary_additional_data(rng, depth=DEFAULT_DEPTH):
    """Random extension data; usually empty, to keep trees small."""
    if depth <= 0 or rng.random() < 0.7:
        return AdditionalData()
    return AdditionalData(
        data_quality=_maybe(rng, depth, lambda: arbitrary(DataQuality, rng, depth - 1)),
        include=_some(rng, depth, lambda: Include(file=arbitrary_text(rng))),
        user_data=_some(rng, depth, lambda: arbitrary(UserData, rng, depth - 1)),
        elements=_some(rng, depth, lambda: arbitrary_element(rng, depth - 1)),
    )


def _arbitrary_name(rng, prefix):
    length = rng.randint(1, 6)
    return prefix + "".join(rng.choice(string.ascii_letters) for _ in range(length))


def arbitrary_element(rng, depth=DEFAULT_DEPTH):
    """A random generic element named ``vendor...``, with ASCII attribute names."""
    attributes = {}
    for _ in range(rng.randint(0, MAX_REPEAT)):
        attributes[_arbitrary_name(rng, "a")] = arbitrary_text(rng)
    return Element(
        name=_arbitrary_name(rng, "vendor"),
        attributes=attributes,
        children=_some(rng, depth, lambda: arbitrary_element(rng, depth - 1)),
    )
