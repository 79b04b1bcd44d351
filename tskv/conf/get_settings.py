# Copyright 2026 Hathor Labs
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
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from tskv.conf.settings import TskvSettings

logger = get_logger()

_CONFIG_YAML_ENV_VAR = 'TSKV_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: TskvSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> TskvSettings:
    """
    Returns the settings loaded from the yaml file in the 'TSKV_CONFIG_YAML' env var.

    If it is not set, the packaged default settings are returned. The settings are loaded only once, asking for them
    again after the env var changed is an error.
    """
    default_settings = str(Path(__file__).parent / 'default.yml')
    settings_yaml_filepath = os.environ.get(_CONFIG_YAML_ENV_VAR, default_settings)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> TskvSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    logger.new().debug('loading settings', source=source)
    _settings_singleton = _SettingsMetadata(
        source=source,
        settings=TskvSettings.from_yaml(filepath=source),
    )

    return _settings_singleton.settings


def _reset_settings_singleton() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
