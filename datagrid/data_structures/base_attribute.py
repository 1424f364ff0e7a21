from datagrid.constants import ATTRIBUTE_TYPE_KEY, NAME_KEY
from datagrid.exceptions import StringIdentifierException, \
    AttributeValueError, \
    InvalidAttributeKeywordError
from datagrid.helpers import normalize_identifier


class BaseAttribute(object):
    '''
    This is a base class for all the types of attributes we might
    implement. An attribute describes a single column of a grid
    (e.g. a feature or a class label) but does not hold any of the
    column's data.

    Attribute equality (`==`) is by *value*: two attributes are
    equal if they are of the same type, have the same name and
    agree on any type-specific parameters (see the subclasses).
    Since equal attributes are not necessarily the same object,
    attributes are deliberately not hashable. Code which needs
    to work with attribute *instances* (e.g. the "references"
    operations in `datagrid.data_structures.attribute_utils`) should
    key on `id(attribute)` instead.
    '''

    def __init__(self, name, **kwargs):

        # Kickoff any validation via the setter
        self.name = name

        # if kwargs is not an empty dict, raise an exception.
        # The derived classes should pop off the kwargs specific
        # to their implementation
        if kwargs != {}:
            raise InvalidAttributeKeywordError('This type of attribute does'
                ' not accept additional keyword arguments.'
                f' Received: {",".join(kwargs.keys())}')

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, val):
        try:
            self._name = normalize_identifier(val)
        except StringIdentifierException as ex:
            raise AttributeValueError(str(ex))

    def to_dict(self):
        '''
        Returns a dictionary representation appropriate for use in JSON-like
        responses. The result can be passed back to
        `datagrid.data_structures.attribute_factory.AttributeFactory`.

        Override as required in your subclass.
        '''
        return {
            ATTRIBUTE_TYPE_KEY: self.typename,
            NAME_KEY: self.name
        }

    def __eq__(self, other):
        if not isinstance(other, BaseAttribute):
            return NotImplemented
        same_type = self.typename == other.typename
        same_name = self.name == other.name
        return all([same_type, same_name])

    def __repr__(self):
        return f'{self.typename}: {self.name}'

    def __str__(self):
        return f'{self.name}'
