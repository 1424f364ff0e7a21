# This module defines constants that may be required to be
# accessed across several modules

# These are "format" strings which dictate how a file should be parsed
# Generally, these correspond with conventional file extensions
CSV_FORMAT = 'csv'
TSV_FORMAT = 'tsv'
XLSX_FORMAT = 'xlsx'

# The keys used in the serialized (dict) representation
# of attributes and attribute specifications
ATTRIBUTE_TYPE_KEY = 'attribute_type'
NAME_KEY = 'name'
PRECISION_KEY = 'precision'
VALUES_KEY = 'values'
GROUP_KEY = 'group'
POSITION_KEY = 'position'
ATTRIBUTE_KEY = 'attribute'

# The number of decimal places used when formatting
# float attributes if nothing else is configured.
DEFAULT_FLOAT_PRECISION = 2

# Names of the environment variables we read in datagrid.settings
LOG_LEVEL_VARIABLE = 'DATAGRID_LOG_LEVEL'
FLOAT_PRECISION_VARIABLE = 'DATAGRID_FLOAT_PRECISION'
