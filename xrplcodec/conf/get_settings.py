# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from threading import Lock
from typing import NamedTuple, Optional

from xrplcodec.conf import DEFAULT_SETTINGS_FILEPATH
from xrplcodec.conf.settings import CodecSettings
from xrplcodec.conf.utils import load_yaml_settings

SETTINGS_ENV_VAR = 'XRPLCODEC_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None
_settings_lock = Lock()


def get_global_settings() -> CodecSettings:
    """
    Return the process-wide settings.

    The yaml file is taken from the 'XRPLCODEC_CONFIG_YAML' env var, or the packaged default.yml if it is not set. It
    is loaded only once, asking for settings from a different file afterwards is an error.
    """
    source = os.environ.get(SETTINGS_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(source)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is None:
        with _settings_lock:
            # another thread may have loaded it while this one waited
            if _settings_singleton is None:
                settings = load_yaml_settings(CodecSettings, source)
                _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    assert _settings_singleton is not None
    if _settings_singleton.source != source:
        raise Exception('loading config twice with a different file')
    return _settings_singleton.settings
