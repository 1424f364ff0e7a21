import os
import tempfile
import unittest
import unittest.mock as mock

import numpy as np
import pandas as pd

from datagrid.data_structures.attribute_types import FloatAttribute, \
    CategoricalAttribute, \
    BinaryAttribute

from datagrid.exceptions import AttributeResolutionError, \
    DataStructureValidationException, \
    FileParseException, \
    ParserNotFoundException

from datagrid.grids.base import DataGrid
from datagrid.grids.table_grid import TableGrid


class TestBaseDataGrid(unittest.TestCase):

    def test_methods_not_implemented(self):
        g = DataGrid()
        with self.assertRaises(NotImplementedError):
            g.all_attributes()
        with self.assertRaises(NotImplementedError):
            g.all_class_attributes()
        with self.assertRaises(NotImplementedError):
            g.get_attribute(FloatAttribute('x'))


class TestTableGrid(unittest.TestCase):

    def setUp(self):
        self.df = pd.DataFrame({
            'sepal_length': [5.1, 4.9, 6.3],
            'petal_count': [3, 4, 5],
            'species': ['setosa', 'virginica', np.nan],
            'is_large': [False, False, True],
        })

    def test_attribute_inference(self):
        grid = TableGrid(self.df)
        attrs = grid.all_attributes()
        self.assertEqual([x.name for x in attrs],
            ['sepal_length', 'petal_count', 'species', 'is_large'])
        self.assertIsInstance(attrs[0], FloatAttribute)
        self.assertIsInstance(attrs[1], FloatAttribute)
        self.assertIsInstance(attrs[2], CategoricalAttribute)
        self.assertIsInstance(attrs[3], BinaryAttribute)

        # nulls are not a category
        self.assertEqual(attrs[2].get_values(), ['setosa', 'virginica'])

    def test_all_attributes_returns_same_instances(self):
        grid = TableGrid(self.df)
        a1 = grid.all_attributes()
        a2 = grid.all_attributes()
        self.assertIsNot(a1, a2)
        for x, y in zip(a1, a2):
            self.assertIs(x, y)

    def test_get_attribute(self):
        grid = TableGrid(self.df)
        spec = grid.get_attribute(FloatAttribute('petal_count'))
        self.assertEqual(spec.group, 'Float')
        self.assertEqual(spec.position, 1)
        self.assertIs(spec.attribute, grid.get_attribute_by_name('petal_count'))

        spec = grid.get_attribute(BinaryAttribute('is_large'))
        self.assertEqual(spec.group, 'Binary')
        self.assertEqual(spec.position, 0)

        # same name, but a different type
        with self.assertRaises(AttributeResolutionError):
            grid.get_attribute(BinaryAttribute('sepal_length'))

        # categorical attributes need to agree on their values
        with self.assertRaises(AttributeResolutionError):
            grid.get_attribute(CategoricalAttribute('species', values=['setosa']))

        with self.assertRaises(AttributeResolutionError):
            grid.get_attribute_by_name('junk')

    def test_class_attributes(self):
        grid = TableGrid(self.df, class_attributes=['species'])
        class_attrs = grid.all_class_attributes()
        self.assertEqual(len(class_attrs), 1)
        self.assertIs(class_attrs[0], grid.get_attribute_by_name('species'))

        # designating an equal instance keeps the grid's own instance
        grid.add_class_attribute(BinaryAttribute('is_large'))
        class_attrs = grid.all_class_attributes()
        self.assertEqual(len(class_attrs), 2)
        self.assertIs(class_attrs[1], grid.get_attribute_by_name('is_large'))

        # adding again does nothing
        grid.add_class_attribute(grid.get_attribute_by_name('is_large'))
        self.assertEqual(len(grid.all_class_attributes()), 2)

        self.assertTrue(grid.remove_class_attribute(BinaryAttribute('is_large')))
        self.assertFalse(grid.remove_class_attribute(BinaryAttribute('is_large')))
        self.assertEqual(len(grid.all_class_attributes()), 1)

        with self.assertRaises(AttributeResolutionError):
            grid.add_class_attribute(FloatAttribute('junk'))

    def test_unknown_class_attribute_name(self):
        with self.assertRaises(AttributeResolutionError):
            TableGrid(self.df, class_attributes=['junk'])

    def test_rejects_bad_tables(self):
        with self.assertRaises(DataStructureValidationException):
            TableGrid([[1, 2], [3, 4]])

        df = pd.DataFrame([[1, 2]], columns=['a', 'a'])
        with self.assertRaises(DataStructureValidationException):
            TableGrid(df)

        df = pd.DataFrame([[1, 2]], columns=['a', 'b(c)'])
        with self.assertRaises(DataStructureValidationException):
            TableGrid(df)

    def test_get_reader(self):
        '''
        Checks that the reader does not depend on the case
        of the passed file format
        '''
        self.assertIs(TableGrid.get_reader('TSV'), pd.read_table)
        self.assertIs(TableGrid.get_reader('csv'), pd.read_csv)
        self.assertIs(TableGrid.get_reader('XlsX'), pd.read_excel)
        self.assertIsNone(TableGrid.get_reader('abc'))

        # legacy excel files are not supported
        self.assertIsNone(TableGrid.get_reader('xls'))

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, 'iris.tsv')
            self.df.to_csv(path, sep='\t', index=False)
            grid = TableGrid.from_file(path, 'tsv', class_attributes=['species'])
        self.assertEqual(len(grid.all_attributes()), 4)
        self.assertEqual(grid.all_class_attributes()[0].name, 'species')

    def test_from_file_unknown_format(self):
        with self.assertRaises(ParserNotFoundException):
            TableGrid.from_file('/some/path.abc', 'abc')

    @mock.patch('datagrid.grids.table_grid.pd.read_csv')
    def test_from_file_parse_error(self, mock_read_csv):
        mock_read_csv.side_effect = pd.errors.ParserError('bad')
        with self.assertRaises(FileParseException):
            TableGrid.from_file('/some/path.csv', 'csv')

    def test_from_file_xls_not_supported(self):
        with self.assertRaises(ParserNotFoundException):
            TableGrid.from_file('/some/path.xls', 'xls')

    def test_normalized_names_must_be_unique(self):
        '''
        Columns which differ only until their names are normalized
        would give two equal attributes, so they are rejected.
        '''
        df = pd.DataFrame({'a b': [1.0], 'a_b': [2.0]})
        with self.assertRaises(DataStructureValidationException):
            TableGrid(df)

    def test_spec_positions_unique(self):
        df = pd.DataFrame({'a b': [1.0], 'c': [2.0], 'd': ['x']})
        grid = TableGrid(df)
        specs = [grid.get_attribute(a) for a in grid.all_attributes()]
        self.assertEqual([s.position for s in specs], [0, 1, 0])
        for s, a in zip(specs, grid.all_attributes()):
            self.assertIs(s.attribute, a)

    def test_class_attribute_by_column_name(self):
        df = pd.DataFrame({'petal length': [1.0], 'y': ['a']})
        grid = TableGrid(df, class_attributes=['petal length'])
        class_attrs = grid.all_class_attributes()
        self.assertEqual(len(class_attrs), 1)
        self.assertEqual(class_attrs[0].name, 'petal_length')
        self.assertIs(grid.get_attribute_by_name('petal length'),
            grid.get_attribute_by_name('petal_length'))

        # names which cannot be identifiers are simply not found
        with self.assertRaises(AttributeResolutionError):
            grid.get_attribute_by_name('petal(length)')
