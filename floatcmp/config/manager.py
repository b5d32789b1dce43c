# Copyright 2020 Francesco Ceccon
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration Manager."""

import toml

from floatcmp.config.configuration import FloatCmpConfig
from floatcmp.config.options import (
    OptionsGroup,
    LevelOption,
    StringOption,
    BoolOption,
)


class ConfigurationManager(object):
    def __init__(self):
        config = FloatCmpConfig()

        # add default sections
        logging_group = config.add_group('logging')
        _assign_options_to_group(_logging_group(), logging_group)

        self._configuration = config

    def update_configuration(self, user_config):
        """Update configuration with a dict or the path of a TOML file."""
        if not isinstance(user_config, dict):
            user_config = toml.load(user_config)
        self._configuration.update(user_config)

    @property
    def configuration(self):
        return self._configuration


def _logging_group():
    return OptionsGroup('logging', [
        LevelOption('level', ['NOTSET', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], 'WARNING'),
        BoolOption('stdout', default=False),
        StringOption('file', default=None),
    ])


def _assign_options_to_group(options, group):
    for option in options.iter():
        group.add_option(option)
