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
"""Configuration options."""
import abc


class OptionsGroup(object):
    def __init__(self, name, options):
        self._options = list(options)
        self.name = name

    def iter(self):
        return iter(self._options)


class Option(metaclass=abc.ABCMeta):
    def __init__(self, name, default=None):
        self.name = name
        self.default = default

    @abc.abstractmethod
    def is_valid(self, value):
        pass

    def validate(self, value):
        """Raise `ValueError` if `value` is not valid for this option."""
        if not self.is_valid(value):
            raise ValueError(
                'Invalid value {!r} for option "{}"'.format(value, self.name)
            )
        return value


class BoolOption(Option):
    def is_valid(self, value):
        return isinstance(value, bool)


class StringOption(Option):
    def is_valid(self, value):
        if value is None:
            return self.default is None
        return isinstance(value, str)


class EnumOption(Option):
    def __init__(self, name, values, default=None):
        super().__init__(name, default)
        self.values = values

    def is_valid(self, value):
        return isinstance(value, str) and value in self.values


class LevelOption(EnumOption):
    """Log level, given by name or by number."""
    def is_valid(self, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return value >= 0
        return super().is_valid(value)
