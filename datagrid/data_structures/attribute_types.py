import logging

from datagrid import settings
from datagrid.constants import PRECISION_KEY, VALUES_KEY
from datagrid.exceptions import AttributeValueError, \
    InvalidAttributeKeywordError
from datagrid.data_structures.base_attribute import BaseAttribute

logger = logging.getLogger(__name__)


class FloatAttribute(BaseAttribute):
    '''
    Describes a numeric column. Represented by
    ```
    {
        "attribute_type": "Float",
        "name": <str>,
        "precision": <int, optional>
    }
    ```
    The precision is the number of decimal places used when
    formatting values of this attribute. If not given, we use
    `datagrid.settings.FLOAT_PRECISION`.

    Note that the precision does not take part in equality; two
    float attributes with the same name are equal.
    '''
    typename = 'Float'

    def __init__(self, name, **kwargs):
        self._set_precision(kwargs)
        super().__init__(name, **kwargs)

    def _set_precision(self, kwargs_dict):
        precision = kwargs_dict.pop(PRECISION_KEY, settings.FLOAT_PRECISION)
        # bool is a subclass of int, so check the exact type
        if (not type(precision) is int) or (precision < 0):
            raise InvalidAttributeKeywordError('The precision of a float'
                f' attribute must be a non-negative integer. Received: {precision}')
        self._precision = precision

    @property
    def precision(self):
        return self._precision

    def format_value(self, val):
        return f'{float(val):.{self._precision}f}'

    def to_dict(self):
        d = super().to_dict()
        d[PRECISION_KEY] = self._precision
        return d


class CategoricalAttribute(BaseAttribute):
    '''
    Describes a column which takes one of a finite set of
    (string) values.
    ```
    {
        "attribute_type": "Categorical",
        "name": <str>,
        "values": [<str>, <str>,...,<str>]
    }
    ```
    The order of the values matters: a value is stored in a grid
    by its index in this list. Hence, two categorical attributes
    are only equal if they share a name AND the same ordered values.
    '''
    typename = 'Categorical'

    def __init__(self, name, **kwargs):
        self._set_values(kwargs)
        super().__init__(name, **kwargs)

    def _set_values(self, kwargs_dict):
        values = kwargs_dict.pop(VALUES_KEY, [])
        if not type(values) is list:
            raise InvalidAttributeKeywordError('Need to supply a list with'
                f' the {VALUES_KEY} key.')
        for v in values:
            if not type(v) is str:
                raise InvalidAttributeKeywordError('The values of a categorical'
                    f' attribute must be strings. Failed on validating: {v}')
        if len(set(values)) != len(values):
            raise InvalidAttributeKeywordError('The values of a categorical'
                ' attribute must be unique.')
        self._values = list(values)

    def get_values(self):
        return list(self._values)

    def index_of(self, val):
        try:
            return self._values.index(val)
        except ValueError:
            raise AttributeValueError(f'The value "{val}" was not among'
                f' the values of attribute {self.name}: {self._values}')

    def add_value(self, val):
        '''
        Adds a new category and returns its index. If the category
        already exists, the existing index is returned.
        '''
        if not type(val) is str:
            raise AttributeValueError('The values of a categorical'
                f' attribute must be strings. Received: {val}')
        if val in self._values:
            return self._values.index(val)
        logger.debug(f'Adding value "{val}" to categorical attribute {self.name}')
        self._values.append(val)
        return len(self._values) - 1

    def to_dict(self):
        d = super().to_dict()
        d[VALUES_KEY] = self.get_values()
        return d

    def __eq__(self, other):
        type_and_name_equal = super().__eq__(other)
        if type_and_name_equal is not True:
            return type_and_name_equal
        return self._values == other._values

    def __repr__(self):
        return (f'{self.typename}: {self.name}'
            f' with values: [{",".join(self._values)}]')


class BinaryAttribute(BaseAttribute):
    '''
    Describes a two-valued (true/false) column.
    ```
    {
        "attribute_type": "Binary",
        "name": <str>
    }
    ```
    '''
    typename = 'Binary'
