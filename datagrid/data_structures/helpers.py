import re

from datagrid.data_structures.attribute_types import FloatAttribute, \
    CategoricalAttribute, \
    BinaryAttribute


def convert_dtype(dtype_str):
    '''
    Takes a pandas/numpy dtype (string) and returns an
    appropriate attribute "type" string.
    For instance, if "int64", return Float since integers are
    numeric columns as far as a grid is concerned.
    Anything we do not recognize is treated as categorical.
    '''
    dtype_str = dtype_str.lower()
    if re.fullmatch('u?int\\d{0,2}', dtype_str):
        return FloatAttribute.typename
    elif re.fullmatch('float\\d{0,2}', dtype_str):
        return FloatAttribute.typename
    elif dtype_str in ['bool', 'boolean']:
        return BinaryAttribute.typename
    else:
        return CategoricalAttribute.typename
