import os

from datagrid.exceptions import ImproperlyConfigured


def get_env(variable_name, default=None):
    '''
    A helper function for loading environment variables
    and issuing error messages. If a `default` is given, it
    is returned when the variable is not set. Otherwise the
    variable is considered required.
    '''
    try:
        return os.environ[variable_name]
    except KeyError:
        if default is not None:
            return default
        raise ImproperlyConfigured('You need to specify the {var}'
            ' environment variable.'.format(var=variable_name)
        )


def get_nonnegative_int_env(variable_name, default=None):
    '''
    Loads an environment variable (via `get_env`) which
    must be interpretable as an integer >= 0.
    '''
    val = get_env(variable_name, default=default)
    try:
        int_val = int(val)
    except (TypeError, ValueError):
        raise ImproperlyConfigured(f'The {variable_name} environment variable'
            f' should be an integer. Received: {val}')
    if int_val < 0:
        raise ImproperlyConfigured(f'The {variable_name} environment variable'
            f' should be >= 0. Received: {val}')
    return int_val


def get_log_level_env(variable_name, default=None):
    '''
    Loads a logging level name (e.g. "DEBUG") from the environment.
    '''
    val = get_env(variable_name, default=default).upper()
    if val not in ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET']:
        raise ImproperlyConfigured(f'The {variable_name} environment variable'
            f' should name a logging level. Received: {val}')
    return val
