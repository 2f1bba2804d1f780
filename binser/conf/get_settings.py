#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import os
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from binser.conf.settings import CodecSettings

logger = get_logger()

_CONFIG_YAML_ENV = 'BINSER_CONFIG_YAML'

DEFAULT_SETTINGS_FILEPATH = str(Path(__file__).parent / 'default.yml')


class _SettingsMetadata(NamedTuple):
    source: str
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """ Return the process-wide codec settings.

    The yaml file is taken from the environment variable 'BINSER_CONFIG_YAML', when it is not set the bundled
    `default.yml` is used.
    """
    settings_yaml_filepath = os.environ.get(_CONFIG_YAML_ENV, DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def _load_settings_singleton(source: str) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    from binser.utils.yaml import model_from_extended_yaml
    settings = model_from_extended_yaml(CodecSettings, filepath=source, custom_root=Path(__file__).parent)
    logger.debug('codec settings loaded', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    return settings


def _reset_settings_singleton() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
