import unittest

from datagrid.exceptions import StringIdentifierException

from . import normalize_identifier, identifiers_valid


class TestHelperFunctions(unittest.TestCase):

    def test_normalize_identifier(self):

        s = 'sepal_length'
        self.assertEqual(s, normalize_identifier(s))

        s = 'petal.width'
        self.assertEqual(s, normalize_identifier(s))

        s = ' sepal length '
        self.assertEqual('sepal_length', normalize_identifier(s))

        s = 'Unnamed: 5'
        self.assertEqual('Unnamed:_5', normalize_identifier(s))

        s = '-abc'
        self.assertEqual(s, normalize_identifier(s))

        with self.assertRaises(StringIdentifierException):
            normalize_identifier('a?bc')

        with self.assertRaises(StringIdentifierException):
            normalize_identifier('ßå')

        # empty (or whitespace-only) names are not identifiers
        with self.assertRaises(StringIdentifierException):
            normalize_identifier('  ')

        with self.assertRaises(StringIdentifierException):
            normalize_identifier(5)

    def test_identifiers_valid(self):
        self.assertTrue(identifiers_valid(['a', 'b c', 'd.e']))
        self.assertFalse(identifiers_valid(['a', 'b(c)']))
        self.assertTrue(identifiers_valid([]))
