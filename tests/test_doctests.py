import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'binser.encoding.bool',
    'binser.encoding.hex',
    'binser.encoding.int',
    'binser.encoding.varint',
    'binser.compound_encoding.collection',
    'binser.json_helper',
    'binser.reader',
    'binser.serializable_pod',
    'binser.serializable_vector',
    'binser.utils.dict',
    'binser.utils.memory',
    'binser.writer',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name):
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
