import re

from datagrid.exceptions import StringIdentifierException

# Attribute names end up as column headers in files handed to
# other tools, so we only permit:
# numbers 0-9
# a-z,A-Z
# colon (:), dot (.), dash(-), and underscore (_)
IDENTIFIER_PATTERN = '[:_\\.\\-a-zA-Z0-9]+'


def normalize_identifier(original_name):
    '''
    A function to help constrain attribute names by removing
    surrounding whitespace, replacing inner spaces with
    underscores, and checking that what remains only consists of
    characters permitted by IDENTIFIER_PATTERN.

    Returns the normalized name.
    '''
    if not type(original_name) is str:
        raise StringIdentifierException(f'The value {original_name}'
            ' was not a string.')

    name = original_name.strip().replace(' ', '_')

    if re.fullmatch(IDENTIFIER_PATTERN, name):
        return name
    else:
        raise StringIdentifierException(
            f'The name "{original_name}" did not match the'
            ' naming requirements. Check that it is not empty and only'
            ' contains letters, numbers, colons, dots, dashes,'
            ' and underscores.')


def identifiers_valid(names):
    '''
    Returns True if every item in `names` (e.g. the column
    headers of a table) can be normalized into a valid identifier.
    '''
    try:
        [normalize_identifier(x) for x in names]
        return True
    except StringIdentifierException:
        return False
