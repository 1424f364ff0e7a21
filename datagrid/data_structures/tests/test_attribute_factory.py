import unittest

from datagrid.data_structures.attribute_factory import AttributeFactory
from datagrid.data_structures.attribute_types import FloatAttribute, \
    CategoricalAttribute, \
    BinaryAttribute
from datagrid.data_structures.helpers import convert_dtype

from datagrid.exceptions import AttributeTypeError, \
    DataStructureValidationException, \
    InvalidAttributeKeywordError


class TestAttributeFactory(unittest.TestCase):

    def test_creates_expected_types(self):
        a = AttributeFactory({
            'attribute_type': 'Float',
            'name': 'x',
            'precision': 1
        })
        self.assertIsInstance(a, FloatAttribute)
        self.assertEqual(a.precision, 1)

        a = AttributeFactory({
            'attribute_type': 'Categorical',
            'name': 'species',
            'values': ['a', 'b']
        })
        self.assertIsInstance(a, CategoricalAttribute)
        self.assertEqual(a.get_values(), ['a', 'b'])

        a = AttributeFactory({
            'attribute_type': 'Binary',
            'name': 'flag'
        })
        self.assertIsInstance(a, BinaryAttribute)

    def test_to_dict_is_accepted(self):
        c = CategoricalAttribute('species', values=['a', 'b'])
        self.assertTrue(AttributeFactory(c.to_dict()) == c)

    def test_input_not_modified(self):
        d = {
            'attribute_type': 'Categorical',
            'name': 'species',
            'values': ['a', 'b']
        }
        AttributeFactory(d)
        self.assertEqual(len(d.keys()), 3)

    def test_bad_input(self):
        with self.assertRaises(DataStructureValidationException):
            AttributeFactory(['Float', 'x'])

        with self.assertRaises(DataStructureValidationException):
            AttributeFactory({'name': 'x'})

        with self.assertRaises(DataStructureValidationException):
            AttributeFactory({'attribute_type': 'Float'})

        with self.assertRaises(AttributeTypeError):
            AttributeFactory({'attribute_type': 'Floatt', 'name': 'x'})

        with self.assertRaises(InvalidAttributeKeywordError):
            AttributeFactory({'attribute_type': 'Binary', 'name': 'x', 'foo': 1})


class TestConvertDtype(unittest.TestCase):

    def test_convert_dtype(self):
        self.assertEqual(convert_dtype('int64'), 'Float')
        self.assertEqual(convert_dtype('uint8'), 'Float')
        self.assertEqual(convert_dtype('Int64'), 'Float')
        self.assertEqual(convert_dtype('float32'), 'Float')
        self.assertEqual(convert_dtype('bool'), 'Binary')
        self.assertEqual(convert_dtype('boolean'), 'Binary')
        self.assertEqual(convert_dtype('object'), 'Categorical')
        self.assertEqual(convert_dtype('category'), 'Categorical')
        self.assertEqual(convert_dtype('interval'), 'Categorical')
