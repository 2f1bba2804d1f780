import unittest

import pytest

from binser import JsonFormatError
from binser.json_helper import (
    dump_json,
    get_json_array,
    get_json_bool,
    get_json_double,
    get_json_int64,
    get_json_object,
    get_json_string,
    get_json_uint32,
    get_json_uint64,
    get_json_value,
    has_member,
    json_type_name,
    parse_json,
)

DOC = parse_json('''{
    "flag": false,
    "name": "alice",
    "small": 4294967295,
    "big": 18446744073709551615,
    "negative": -9223372036854775808,
    "ratio": 0.5,
    "list": [1, "two", null],
    "object": {"nested": true},
    "nothing": null
}''')


class JsonHelperTestCase(unittest.TestCase):
    def test_getters(self):
        self.assertIs(get_json_bool(DOC, 'flag'), False)
        self.assertEqual(get_json_string(DOC, 'name'), 'alice')
        self.assertEqual(get_json_uint32(DOC, 'small'), 0xffff_ffff)
        self.assertEqual(get_json_uint64(DOC, 'big'), 0xffff_ffff_ffff_ffff)
        self.assertEqual(get_json_int64(DOC, 'negative'), -(1 << 63))
        self.assertEqual(get_json_double(DOC, 'ratio'), 0.5)
        self.assertEqual(get_json_array(DOC, 'list'), [1, 'two', None])
        self.assertEqual(get_json_object(DOC, 'object'), {'nested': True})

    def test_getters_without_key(self):
        self.assertEqual(get_json_string('x'), 'x')
        self.assertEqual(get_json_uint32(7), 7)
        self.assertEqual(get_json_array([]), [])

    def test_has_member(self):
        self.assertTrue(has_member(DOC, 'nothing'))
        self.assertFalse(has_member(DOC, 'missing'))
        self.assertFalse(has_member([], 'missing'))

    def test_missing_member(self):
        with self.assertRaises(JsonFormatError) as cm:
            get_json_value(DOC, 'missing')
        self.assertEqual(str(cm.exception), "Missing JSON parameter: 'missing'")

    def test_not_an_object(self):
        with self.assertRaises(JsonFormatError) as cm:
            get_json_string([1], 'name')
        self.assertEqual(str(cm.exception), 'JSON value is of the wrong type: Array')

    def test_null_member_is_present(self):
        self.assertIsNone(get_json_value(DOC, 'nothing'))


@pytest.mark.parametrize('getter, key, found', [
    (get_json_bool, 'name', 'String'),
    (get_json_string, 'flag', 'False'),
    (get_json_string, 'nothing', 'Null'),
    (get_json_uint32, 'big', 'Number'),
    (get_json_uint32, 'negative', 'Number'),
    (get_json_uint32, 'ratio', 'Number'),
    (get_json_uint32, 'flag', 'False'),
    (get_json_uint64, 'negative', 'Number'),
    (get_json_int64, 'big', 'Number'),
    (get_json_double, 'name', 'String'),
    (get_json_array, 'object', 'Object'),
    (get_json_object, 'list', 'Array'),
])
def test_wrong_type(getter, key, found):
    with pytest.raises(JsonFormatError) as e:
        getter(DOC, key)
    assert str(e.value).endswith(f', got {found}')
    assert str(e.value).startswith('JSON parameter is wrong type. Expected ')


@pytest.mark.parametrize('value, name', [
    (None, 'Null'),
    (True, 'True'),
    (False, 'False'),
    ({}, 'Object'),
    ([], 'Array'),
    ('', 'String'),
    (0, 'Number'),
    (1.5, 'Number'),
])
def test_json_type_name(value, name):
    assert json_type_name(value) == name


def test_parse_and_dump():
    assert parse_json(dump_json({'a': [1, 'b']})) == {'a': [1, 'b']}
    with pytest.raises(JsonFormatError):
        parse_json('{not json')
