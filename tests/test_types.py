import math

import pytest

from nova.types import divide, is_equal, is_number, is_truthy, stringify, type_name


@pytest.mark.parametrize('value, expected', [
    (None, False),
    (False, False),
    (True, True),
    (0.0, True),
    ('', True),
    ('false', True),
])
def test_truthiness(value, expected):
    assert is_truthy(value) is expected


def test_booleans_are_not_numbers():
    assert is_number(1.0)
    assert not is_number(True)
    assert not is_number('1')


@pytest.mark.parametrize('a, b, expected', [
    (None, None, True),
    (None, False, False),
    (1.0, 1.0, True),
    (1.0, True, False),
    (0.0, False, False),
    ('a', 'a', True),
    ('1', 1.0, False),
    (math.nan, math.nan, False),
])
def test_equality(a, b, expected):
    assert is_equal(a, b) is expected


def test_divide():
    assert divide(7.0, 2.0) == 3.5
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert divide(1.0, -0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))


@pytest.mark.parametrize('value, expected', [
    (None, 'nil'),
    (True, 'true'),
    (False, 'false'),
    (3.0, '3'),
    (-0.0, '-0'),
    (2.5, '2.5'),
    (0.1 + 0.2, '0.30000000000000004'),
    (1e16, '10000000000000000'),
    (-2.0 ** 60, '-1152921504606846976'),
    (1e21, '1e+21'),
    (1.5e-7, '1.5e-07'),
    (math.inf, 'inf'),
    (-math.inf, '-inf'),
    (math.nan, 'nan'),
    ('text', 'text'),
])
def test_stringify(value, expected):
    assert stringify(value) == expected


def test_type_name():
    assert [type_name(v) for v in (None, True, 1.0, 's')] == ['nil', 'boolean', 'number', 'string']
