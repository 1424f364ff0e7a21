class DataGridException(Exception):
    '''
    This base class allows us to organize our datagrid-specific
    exceptions and catch them (and derived classes) specifically.
    '''
    pass


class ImproperlyConfigured(DataGridException):
    '''
    Raised if a required environment variable is missing
    or cannot be interpreted.
    '''
    pass


class StringIdentifierException(DataGridException):
    '''
    Raised if a String identifier (e.g. an attribute "name")
    does not match our constraints.
    '''
    pass


class AttributeValueError(DataGridException):
    '''
    Raised by the attribute subclasses if something is amiss.
    For example, if we ask a categorical attribute for the index
    of a value it does not know about.
    '''
    pass


class AttributeTypeError(DataGridException):
    '''
    Raised if an invalid attribute type is requested.
    For instance, if there is a typo in a serialized attribute
    and the user needs to correct the type.
    '''
    pass


class InvalidAttributeKeywordError(DataGridException):
    '''
    Raised if invalid keyword args are used.

    An example would be if we declare a float attribute
    and provide the precision as a string.
    '''
    pass


class DataStructureValidationException(DataGridException):
    '''
    Raised when a data structure (e.g. a serialized attribute
    or a table handed to a grid) is not properly formatted.
    '''
    pass


class AttributeResolutionError(DataGridException):
    '''
    Raised when an attribute cannot be resolved to an
    AttributeSpec within a grid, i.e. the attribute is not
    part of that grid. This indicates the caller handed us
    an attribute which is foreign to the grid.
    '''
    pass


class ParserNotFoundException(DataGridException):
    '''
    Raised if a parser for a table-based file cannot be found.
    '''
    pass


class FileParseException(DataGridException):
    '''
    Raised if a table-based file cannot be parsed.
    '''
    pass
