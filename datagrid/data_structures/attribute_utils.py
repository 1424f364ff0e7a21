'''
Utility functions relating to attributes and attribute specifications.

There are two families of set operations here:

- `attribute_intersect` and `attribute_difference` compare attributes
  by value (`==`). They are O(len(a1) * len(a2)), but they preserve
  the order of the first argument and work for attributes coming from
  different grids.

- `attribute_intersect_references` and `attribute_difference_references`
  compare attribute *instances* (`id()`). They are fast, but make no
  ordering guarantee and are only correct if both sequences hold
  attributes taken from the same grid. Value-equal attributes which are
  distinct objects are NOT considered the same.
'''
import logging

from datagrid.exceptions import AttributeResolutionError
from datagrid.data_structures.attribute_types import FloatAttribute

logger = logging.getLogger(__name__)


def non_class_float_attributes(grid):
    '''
    Returns all FloatAttributes of `grid` which aren't
    designated as a class attribute. Ordered as in
    `grid.all_attributes()`.
    '''
    class_attrs = grid.all_class_attributes()
    return [
        a for a in grid.all_attributes()
        if isinstance(a, FloatAttribute) and not _has_equal(a, class_attrs)
    ]


def non_class_attributes(grid):
    '''
    Returns all attributes of `grid` which aren't designated
    as a class attribute.

    The result is not guaranteed to be ordered.
    '''
    class_attrs = grid.all_class_attributes()
    all_attrs = grid.all_attributes()
    return attribute_difference_references(all_attrs, class_attrs)


def resolve_all_attributes(grid, attrs):
    '''
    Returns the AttributeSpecs describing each of `attrs` within
    `grid`, in the same order.

    If any of the attributes is not part of `grid`, we raise an
    AttributeResolutionError immediately; no partial result is
    returned.
    '''
    specs = []
    for a in attrs:
        try:
            specs.append(grid.get_attribute(a))
        except AttributeResolutionError as ex:
            logger.error(f'Error resolving attribute {a}: {ex}')
            raise AttributeResolutionError(
                f'Error resolving attribute {a}: {ex}') from ex
    return specs


def get_all_attribute_specs(grid):
    '''
    Retrieves every attribute specification from `grid`,
    ordered as in `grid.all_attributes()`.
    '''
    return get_some_attribute_specs(grid, grid.all_attributes())


def get_some_attribute_specs(grid, attrs):
    '''
    Returns the attribute specifications for a subset of the
    attributes of `grid`. An attribute which is not part of
    `grid` aborts the whole call (the grid's
    AttributeResolutionError propagates).
    '''
    return [grid.get_attribute(a) for a in attrs]


def _has_equal(attr, attrs):
    return any(attr == b for b in attrs)


def _build_attribute_set(attrs):
    # keyed on id() so that equal-but-distinct attributes stay apart
    return {id(a): a for a in attrs}


def attribute_intersect(a1, a2):
    '''
    Returns the intersection of two attribute sequences.

    IMPORTANT: result is ordered in order of the first argument.

    IMPORTANT: result contains only attributes from a1.
    '''
    return [a for a in a1 if _has_equal(a, a2)]


def attribute_intersect_references(a1, a2):
    '''
    Returns the intersection of two attribute sequences.

    IMPORTANT: result is not guaranteed to be ordered.

    IMPORTANT: done using object identity for speed, use
    `attribute_intersect` if the attributes originate from
    different grids.
    '''
    a1_set = _build_attribute_set(a1)
    a2_set = _build_attribute_set(a2)
    return [a for k, a in a1_set.items() if k in a2_set]


def attribute_difference(a1, a2):
    '''
    Returns the difference between two attribute sequences:
    i.e. all the values in a1 which do not occur in a2.

    IMPORTANT: result is ordered the same as a1.

    IMPORTANT: result only contains values from a1.
    '''
    return [a for a in a1 if not _has_equal(a, a2)]


def attribute_difference_references(a1, a2):
    '''
    Returns the difference between two attribute sequences:
    i.e. all the instances in a1 which do not occur in a2.

    IMPORTANT: result is not guaranteed to be ordered.

    IMPORTANT: done using object identity for speed, use
    `attribute_difference` if the attributes originate from
    different grids.
    '''
    a1_set = _build_attribute_set(a1)
    a2_set = _build_attribute_set(a2)
    return [a for k, a in a1_set.items() if k not in a2_set]
