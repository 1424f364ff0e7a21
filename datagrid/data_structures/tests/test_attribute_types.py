import unittest
import unittest.mock as mock

from datagrid.data_structures.attribute_types import FloatAttribute, \
    CategoricalAttribute, \
    BinaryAttribute
from datagrid.data_structures.attribute_spec import AttributeSpec

from datagrid.exceptions import AttributeValueError, \
    InvalidAttributeKeywordError


class TestAttributeTypes(unittest.TestCase):
    '''
    Tests that the attribute types behave
    as expected.
    '''

    def test_float_attribute(self):
        f = FloatAttribute('sepal_length', precision=3)
        self.assertEqual(f.name, 'sepal_length')
        self.assertEqual(f.precision, 3)
        self.assertEqual(f.format_value(1.23456), '1.235')
        self.assertDictEqual(
            f.to_dict(),
            {
                'attribute_type': 'Float',
                'name': 'sepal_length',
                'precision': 3
            }
        )

    @mock.patch('datagrid.data_structures.attribute_types.settings')
    def test_float_default_precision(self, mock_settings):
        mock_settings.FLOAT_PRECISION = 4
        f = FloatAttribute('x')
        self.assertEqual(f.precision, 4)
        self.assertEqual(f.format_value(2), '2.0000')

    def test_bad_float_precision(self):
        with self.assertRaises(InvalidAttributeKeywordError):
            FloatAttribute('x', precision=-1)
        with self.assertRaises(InvalidAttributeKeywordError):
            FloatAttribute('x', precision='2')
        with self.assertRaises(InvalidAttributeKeywordError):
            FloatAttribute('x', precision=True)

    def test_extra_keywords_rejected(self):
        with self.assertRaises(InvalidAttributeKeywordError):
            FloatAttribute('x', foo=1)
        with self.assertRaises(InvalidAttributeKeywordError):
            BinaryAttribute('x', values=['a'])

    def test_names_normalized(self):
        f = FloatAttribute(' sepal length ')
        self.assertEqual(f.name, 'sepal_length')
        self.assertEqual(str(f), 'sepal_length')
        self.assertEqual(repr(f), 'Float: sepal_length')

        with self.assertRaises(AttributeValueError):
            FloatAttribute('a?b')
        with self.assertRaises(AttributeValueError):
            BinaryAttribute(None)

    def test_float_equality(self):
        # precision does not take part in equality
        a1 = FloatAttribute('x', precision=1)
        a2 = FloatAttribute('x', precision=5)
        self.assertTrue(a1 == a2)
        self.assertFalse(a1 == FloatAttribute('y'))
        self.assertTrue(a1 != FloatAttribute('y'))

    def test_different_types_not_equal(self):
        f = FloatAttribute('x')
        b = BinaryAttribute('x')
        c = CategoricalAttribute('x')
        self.assertFalse(f == b)
        self.assertFalse(b == c)
        self.assertFalse(c == f)
        self.assertFalse(f == 'x')

    def test_attributes_not_hashable(self):
        with self.assertRaises(TypeError):
            set([FloatAttribute('x')])

    def test_categorical_attribute(self):
        c = CategoricalAttribute('species', values=['setosa', 'virginica'])
        self.assertEqual(c.get_values(), ['setosa', 'virginica'])
        self.assertEqual(c.index_of('virginica'), 1)
        with self.assertRaises(AttributeValueError):
            c.index_of('versicolor')

        self.assertEqual(c.add_value('versicolor'), 2)
        # adding an existing value gives back the existing index
        self.assertEqual(c.add_value('setosa'), 0)
        self.assertEqual(c.get_values(), ['setosa', 'virginica', 'versicolor'])
        with self.assertRaises(AttributeValueError):
            c.add_value(3)

        # get_values returns a copy
        c.get_values().append('abc')
        self.assertEqual(len(c.get_values()), 3)

        self.assertDictEqual(
            c.to_dict(),
            {
                'attribute_type': 'Categorical',
                'name': 'species',
                'values': ['setosa', 'virginica', 'versicolor']
            }
        )

    def test_categorical_equality(self):
        c1 = CategoricalAttribute('c', values=['a', 'b'])
        c2 = CategoricalAttribute('c', values=['a', 'b'])
        c3 = CategoricalAttribute('c', values=['b', 'a'])
        self.assertTrue(c1 == c2)
        self.assertFalse(c1 == c3)

    def test_bad_categorical_values(self):
        with self.assertRaises(InvalidAttributeKeywordError):
            CategoricalAttribute('c', values='a')
        with self.assertRaises(InvalidAttributeKeywordError):
            CategoricalAttribute('c', values=['a', 1])
        with self.assertRaises(InvalidAttributeKeywordError):
            CategoricalAttribute('c', values=['a', 'a'])

    def test_attribute_spec(self):
        f = FloatAttribute('x', precision=2)
        s1 = AttributeSpec('Float', 0, f)
        self.assertEqual(s1.group, 'Float')
        self.assertEqual(s1.position, 0)
        self.assertIs(s1.attribute, f)

        # equality compares the attribute by value
        s2 = AttributeSpec('Float', 0, FloatAttribute('x'))
        self.assertTrue(s1 == s2)
        self.assertFalse(s1 == AttributeSpec('Float', 1, f))

        self.assertDictEqual(
            s1.to_dict(),
            {
                'group': 'Float',
                'position': 0,
                'attribute': {
                    'attribute_type': 'Float',
                    'name': 'x',
                    'precision': 2
                }
            }
        )
