class DataGrid(object):
    '''
    The base class for the tabular structures whose attributes
    the functions in `datagrid.data_structures.attribute_utils`
    operate on. A grid knows its attributes (columns), which of
    those are designated as "class" (label/target) attributes,
    and where each attribute is stored.
    '''

    def all_attributes(self):
        '''
        Returns a list of all the attributes of this grid.
        '''
        raise NotImplementedError('You must'
        ' implement this method in the derived class')

    def all_class_attributes(self):
        '''
        Returns a list of the attributes designated as class attributes.
        '''
        raise NotImplementedError('You must'
        ' implement this method in the derived class')

    def get_attribute(self, attribute):
        '''
        Returns the `AttributeSpec` for `attribute`. Implementations
        must raise `datagrid.exceptions.AttributeResolutionError`
        if the attribute is not part of the grid.
        '''
        raise NotImplementedError('You must'
        ' implement this method in the derived class')
