import logging
from copy import deepcopy

from datagrid.constants import ATTRIBUTE_TYPE_KEY, NAME_KEY
from datagrid.exceptions import AttributeTypeError, \
    DataStructureValidationException
from datagrid.data_structures.attribute_types import FloatAttribute, \
    CategoricalAttribute, \
    BinaryAttribute

logger = logging.getLogger(__name__)

attribute_types = [
    FloatAttribute,
    CategoricalAttribute,
    BinaryAttribute
]
attribute_type_mapping = {x.typename: x for x in attribute_types}


def AttributeFactory(val, type_mapping=attribute_type_mapping):
    '''
    This function is a factory which creates/returns
    a child class of `data_structures.base_attribute.BaseAttribute`.

    For the first arg `val`, we pass a dict that contains
    an `attribute_type` key which defines the particular subclass
    of `BaseAttribute` that we want. Other fields in that dict
    define the name and potentially other fields specific to the type.

    `val` will have some JSON structure like
    ```
    {
        "attribute_type": <str>,
        "name": <str>,
        ...other keys specific to the attribute...
    }
    ```
    For instance, a categorical attribute would look like:
    ```
    {
        "attribute_type": "Categorical",
        "name": "species",
        "values": ["setosa", "versicolor", "virginica"]
    }
    ```
    Hence, we know to create and return an instance of
    `CategoricalAttribute`. The remaining fields are specific to
    that implementation class and are passed to its constructor.

    This is the inverse of the `to_dict` method on the attributes.
    '''
    # The factory expects a dict. Anything else
    # is rejected immediately
    if not type(val) is dict:
        raise DataStructureValidationException('The constructor for an'
            ' attribute expects a dictionary.')

    # to avoid any potential side effects, perform a copy on the dict
    attr_dict = deepcopy(val)

    try:
        typename = attr_dict.pop(ATTRIBUTE_TYPE_KEY)
    except KeyError:
        raise DataStructureValidationException(f'The "{ATTRIBUTE_TYPE_KEY}"'
            ' key is required.')

    try:
        name = attr_dict.pop(NAME_KEY)
    except KeyError:
        raise DataStructureValidationException(f'The "{NAME_KEY}"'
            ' key is required.')

    try:
        attribute_type_class = type_mapping[typename]
    except KeyError:
        logger.info(f'Requested an unknown attribute type: {typename}')
        raise AttributeTypeError(f'Could not locate type: {typename}.')

    # What remains of `attr_dict` are the type-specific kwargs
    return attribute_type_class(name, **attr_dict)
