from datagrid.constants import GROUP_KEY, \
    POSITION_KEY, \
    ATTRIBUTE_KEY


class AttributeSpec(object):
    '''
    An `AttributeSpec` ties an attribute to the place where a
    particular grid stores it: the `group` (the name of the block
    of columns holding the attribute) and the `position` of the
    attribute within that group.

    Specs are only meaningful for the grid which produced them
    (see `DataGrid.get_attribute`).
    '''

    def __init__(self, group, position, attribute):
        self._group = group
        self._position = position
        self._attribute = attribute

    @property
    def group(self):
        return self._group

    @property
    def position(self):
        return self._position

    @property
    def attribute(self):
        return self._attribute

    def to_dict(self):
        return {
            GROUP_KEY: self._group,
            POSITION_KEY: self._position,
            ATTRIBUTE_KEY: self._attribute.to_dict()
        }

    def __eq__(self, other):
        if not isinstance(other, AttributeSpec):
            return NotImplemented
        return all([
            self._group == other._group,
            self._position == other._position,
            self._attribute == other._attribute
        ])

    def __repr__(self):
        return (f'AttributeSpec({self._group}, {self._position}):'
            f' {repr(self._attribute)}')
