'''
Settings for datagrid. These are read from the environment
once, at import time:

DATAGRID_LOG_LEVEL: the level for the root logger when
    `configure_logging` is called. Defaults to INFO.

DATAGRID_FLOAT_PRECISION: the number of decimal places a
    FloatAttribute uses for formatting if a precision is not
    given explicitly. Defaults to 2.
'''
import logging.config

from datagrid.constants import LOG_LEVEL_VARIABLE, \
    FLOAT_PRECISION_VARIABLE, \
    DEFAULT_FLOAT_PRECISION
from datagrid.settings_helpers import get_log_level_env, \
    get_nonnegative_int_env

LOGLEVEL = get_log_level_env(LOG_LEVEL_VARIABLE, default='INFO')

FLOAT_PRECISION = get_nonnegative_int_env(FLOAT_PRECISION_VARIABLE,
    default=str(DEFAULT_FLOAT_PRECISION))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module}: {message}',
            'style': '{',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose'
        },
    },
    'root': {
        'handlers': ['console'],
        'level':  LOGLEVEL,
    },
}


def configure_logging():
    logging.config.dictConfig(LOGGING)
