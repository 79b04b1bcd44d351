import os

from tskv.conf import UNITTESTS_SETTINGS_FILEPATH
from tskv.log import setup_logging_from_settings

os.environ['TSKV_CONFIG_YAML'] = os.environ.get('TSKV_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

setup_logging_from_settings()
