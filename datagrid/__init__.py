'''
datagrid: attribute descriptors for tabular machine-learning
data and set-style operations over them.

- data_structures: attribute types, specs and the set operations
  (see data_structures.attribute_utils)
- grids: the DataGrid interface and a pandas-backed implementation
'''
