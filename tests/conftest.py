import os

from binser.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BINSER_CONFIG_YAML'] = os.environ.get('BINSER_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
