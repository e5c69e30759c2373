"""Named Functions — tests for built-in projections."""

import pytest

from requirement.core.functions import (
    hash_code,
    keys,
    length,
    map_size,
    size,
    stringify,
    values,
)


@pytest.mark.parametrize("factory, display", [
    (hash_code, "hash"),
    (length, "length"),
    (keys, "keys"),
    (values, "values"),
    (map_size, "size"),
    (size, "size"),
    (stringify, "str"),
])
def test_display_names(factory, display):
    assert str(factory()) == display


def test_projections_apply():
    assert length()("abc") == 3
    assert size()([1, 2]) == 2
    assert map_size()({"a": 1}) == 1
    assert keys()({"a": 1, "b": 2}) == ["a", "b"]
    assert values()({"a": 1, "b": 2}) == [1, 2]
    assert stringify()(12) == "12"
    assert hash_code()("abc") == hash("abc")


def test_factories_return_shared_instances():
    assert length() is length()


def test_length_of_none_raises():
    with pytest.raises(TypeError):
        length()(None)
