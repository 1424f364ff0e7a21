# This file contains the pandas-backed grid and methods
# for creating it from table-based files
import logging
from collections import OrderedDict

import pandas as pd

from datagrid.constants import CSV_FORMAT, \
    TSV_FORMAT, \
    XLSX_FORMAT, \
    ATTRIBUTE_TYPE_KEY, \
    NAME_KEY, \
    VALUES_KEY

from datagrid.exceptions import AttributeResolutionError, \
    DataStructureValidationException, \
    FileParseException, \
    ParserNotFoundException, \
    StringIdentifierException

from datagrid.helpers import identifiers_valid, \
    normalize_identifier

from datagrid.data_structures.attribute_factory import AttributeFactory
from datagrid.data_structures.attribute_spec import AttributeSpec
from datagrid.data_structures.attribute_types import CategoricalAttribute
from datagrid.data_structures.helpers import convert_dtype

from .base import DataGrid

logger = logging.getLogger(__name__)


# Some error messages:
NOT_A_TABLE_ERROR = 'A TableGrid must be created from a pandas DataFrame.'

NAMING_ERROR = ('The columns of your table contained names with'
    ' characters that we do not permit. We only allow'
    ' letters A-Z, numbers 0-9, colons (:), dots (.), dashes (-),'
    ' and underscores (_).')

DUPLICATE_COLUMNS_ERROR = ('The column names of your table were not unique.'
    ' Duplicates: {cols}')

PARSER_NOT_FOUND_ERROR = ('Could not find an appropriate parser'
    ' for the format "{file_format}". Acceptable formats are: {formats}')

SPECIFIC_PARSE_ERROR = ('There was an error when parsing the file at {path}.'
    ' This can often happen if the incorrect format was selected.'
    ' The specific error report was: {ex}')


class TableGrid(DataGrid):
    '''
    A `TableGrid` wraps a pandas DataFrame and exposes its columns
    as attributes. The type of each attribute is inferred from the
    column's dtype (see `datagrid.data_structures.helpers.convert_dtype`).
    For categorical columns, the categories are the sorted string
    representations of the non-null values.

    Attributes are stored in groups, one per attribute type (in order
    of first appearance). The `AttributeSpec` for an attribute gives
    the name of the group and the position within that group.

    Class attributes can be given by name when the grid is created,
    or designated later via `add_class_attribute`.
    '''
    ACCEPTABLE_FORMATS = [
        CSV_FORMAT,
        TSV_FORMAT,
        XLSX_FORMAT
    ]

    def __init__(self, table, class_attributes=None):
        if not isinstance(table, pd.DataFrame):
            raise DataStructureValidationException(NOT_A_TABLE_ERROR)

        if not identifiers_valid(table.columns):
            raise DataStructureValidationException(NAMING_ERROR)

        # attributes are named by the normalized column names, so
        # uniqueness is checked after normalizing
        normalized_names = pd.Index(
            [normalize_identifier(x) for x in table.columns])
        duplicated = normalized_names[normalized_names.duplicated()]
        if len(duplicated) > 0:
            raise DataStructureValidationException(
                DUPLICATE_COLUMNS_ERROR.format(
                    cols=','.join([str(x) for x in duplicated])))

        self.table = table
        self._specs = self._build_specs(table)
        self._class_attributes = []

        if class_attributes is not None:
            for name in class_attributes:
                self.add_class_attribute(self.get_attribute_by_name(name))

    @staticmethod
    def _infer_attribute(column_name, column):
        typename = convert_dtype(str(column.dtype))
        attr_dict = {
            ATTRIBUTE_TYPE_KEY: typename,
            NAME_KEY: column_name
        }
        if typename == CategoricalAttribute.typename:
            attr_dict[VALUES_KEY] = sorted(
                set([str(x) for x in column.dropna().unique()]))
        return AttributeFactory(attr_dict)

    def _build_specs(self, table):
        groups = OrderedDict()
        specs = []
        for c in table.columns:
            attr = TableGrid._infer_attribute(c, table[c])
            group = groups.setdefault(attr.typename, [])
            specs.append(AttributeSpec(attr.typename, len(group), attr))
            group.append(attr)
        return specs

    @staticmethod
    def get_reader(file_format):
        '''
        Maps a format string (e.g. "csv", see ACCEPTABLE_FORMATS) to
        the pandas function which reads it, or None if we cannot
        read that format.
        '''
        file_format = file_format.lower()
        if file_format == CSV_FORMAT:
            return pd.read_csv
        elif file_format == TSV_FORMAT:
            return pd.read_table
        elif file_format == XLSX_FORMAT:
            return pd.read_excel
        else:
            logger.error(f'Unrecognized file format: {file_format}')
            return None

    @classmethod
    def from_file(cls, path, file_format, class_attributes=None):
        reader = cls.get_reader(file_format)
        if reader is None:
            raise ParserNotFoundException(PARSER_NOT_FOUND_ERROR.format(
                file_format=file_format,
                formats=', '.join(cls.ACCEPTABLE_FORMATS)))
        try:
            table = reader(path)
        except ValueError as ex:
            # pandas parse errors (e.g. ParserError, EmptyDataError)
            # derive from ValueError
            logger.info(f'Failed to parse {path} as {file_format}: {ex}')
            raise FileParseException(
                SPECIFIC_PARSE_ERROR.format(path=path, ex=ex)) from ex
        logger.info(f'Read a table with {table.shape[1]} columns'
            f' and {table.shape[0]} rows from {path}')
        return cls(table, class_attributes=class_attributes)

    def all_attributes(self):
        return [s.attribute for s in self._specs]

    def all_class_attributes(self):
        return list(self._class_attributes)

    def get_attribute(self, attribute):
        for spec in self._specs:
            if spec.attribute == attribute:
                return spec
        raise AttributeResolutionError(
            f'Could not resolve attribute {attribute} in this grid.')

    def get_attribute_by_name(self, name):
        '''
        Looks up an attribute by column name. The name is normalized
        the same way the column names were, so "petal length" finds
        the attribute "petal_length".
        '''
        try:
            normalized_name = normalize_identifier(name)
        except StringIdentifierException:
            raise AttributeResolutionError(
                f'There is no attribute named "{name}" in this grid.')
        for spec in self._specs:
            if spec.attribute.name == normalized_name:
                return spec.attribute
        raise AttributeResolutionError(
            f'There is no attribute named "{name}" in this grid.')

    def add_class_attribute(self, attribute):
        '''
        Designates `attribute` as a class attribute. We always keep
        this grid's own attribute instance (which may differ from the
        one passed if the two are merely equal). Designating the same
        attribute twice has no effect.
        '''
        attr = self.get_attribute(attribute).attribute
        if not any([attr is x for x in self._class_attributes]):
            logger.debug(f'Designating {attr} as a class attribute.')
            self._class_attributes.append(attr)

    def remove_class_attribute(self, attribute):
        '''
        Removes `attribute` from the class attributes. Returns
        False if it was not a class attribute.
        '''
        for i, x in enumerate(self._class_attributes):
            if x == attribute:
                del self._class_attributes[i]
                return True
        return False

    def __repr__(self):
        return 'TableGrid with attributes: [{attrs}]'.format(
            attrs=','.join([str(x) for x in self.all_attributes()]))
