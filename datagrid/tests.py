import os
import unittest
import unittest.mock as mock

from datagrid import settings
from datagrid.settings_helpers import get_env, \
    get_nonnegative_int_env, \
    get_log_level_env
from datagrid.exceptions import ImproperlyConfigured


class TestSettingsHelpers(unittest.TestCase):

    @mock.patch.dict(os.environ, {'DATAGRID_TEST_VAR': 'abc'})
    def test_get_env(self):
        self.assertEqual(get_env('DATAGRID_TEST_VAR'), 'abc')
        self.assertEqual(get_env('DATAGRID_TEST_VAR', default='x'), 'abc')

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_missing_env(self):
        self.assertEqual(get_env('DATAGRID_TEST_VAR', default='x'), 'x')
        with self.assertRaises(ImproperlyConfigured):
            get_env('DATAGRID_TEST_VAR')

    @mock.patch.dict(os.environ, {'DATAGRID_TEST_VAR': '3'})
    def test_int_env(self):
        self.assertEqual(get_nonnegative_int_env('DATAGRID_TEST_VAR'), 3)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_int_env_default(self):
        self.assertEqual(
            get_nonnegative_int_env('DATAGRID_TEST_VAR', default='2'), 2)

    def test_bad_int_env(self):
        for val in ['abc', '-1', '1.5']:
            with mock.patch.dict(os.environ, {'DATAGRID_TEST_VAR': val}):
                with self.assertRaises(ImproperlyConfigured):
                    get_nonnegative_int_env('DATAGRID_TEST_VAR')

    def test_log_level_env(self):
        with mock.patch.dict(os.environ, {'DATAGRID_TEST_VAR': 'debug'}):
            self.assertEqual(get_log_level_env('DATAGRID_TEST_VAR'), 'DEBUG')
        with mock.patch.dict(os.environ, {'DATAGRID_TEST_VAR': 'loud'}):
            with self.assertRaises(ImproperlyConfigured):
                get_log_level_env('DATAGRID_TEST_VAR')


class TestSettings(unittest.TestCase):

    def test_defaults_are_valid(self):
        self.assertIn(settings.LOGLEVEL,
            ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET'])
        self.assertTrue(settings.FLOAT_PRECISION >= 0)

    @mock.patch('datagrid.settings.logging.config.dictConfig')
    def test_configure_logging(self, mock_dict_config):
        settings.configure_logging()
        mock_dict_config.assert_called_once_with(settings.LOGGING)
