import pytest

from opendrive.core.sequences import Sequence1


def test_requires_an_item():
    with pytest.raises(ValueError):
        Sequence1([])
    with pytest.raises(ValueError):
        Sequence1.coerce(())


def test_head_and_tail():
    seq = Sequence1([1, 2, 3])
    assert seq.head == 1
    assert seq.tail == [2, 3]
    assert len(seq) == 3
    assert list(seq) == [1, 2, 3]


def test_coerce():
    seq = Sequence1([1])
    assert Sequence1.coerce(seq) is seq
    assert Sequence1.coerce(iter([4, 5])) == [4, 5]


def test_mutation():
    seq = Sequence1([1])
    seq.append(2)
    seq[0] = 0
    assert seq == [0, 2]
    del seq[0]
    assert seq == Sequence1([2])
    seq.insert(0, 1)
    seq[0:1] = [7, 8]
    assert seq == [7, 8, 2]


def test_cannot_become_empty():
    seq = Sequence1([1])
    with pytest.raises(ValueError):
        del seq[0]
    with pytest.raises(ValueError):
        seq.pop()
    with pytest.raises(ValueError):
        seq[:] = []
    assert seq == [1]


def test_equality():
    assert Sequence1([1, 2]) == [1, 2]
    assert Sequence1([1, 2]) != [2, 1]
    assert Sequence1([1]) != (1,)
    with pytest.raises(TypeError):
        hash(Sequence1([1]))
