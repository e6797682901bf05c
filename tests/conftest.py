import os

from xrplcodec.conf import DEFAULT_SETTINGS_FILEPATH

os.environ['XRPLCODEC_CONFIG_YAML'] = os.environ.get('XRPLCODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)
