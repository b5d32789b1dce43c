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

"""floatcmp configuration module."""


class _ConfigGroup(object):
    def __init__(self, name):
        self.name = name
        self._items = {}
        self._options = {}

    def get(self, key, default=None):
        """Get value for key."""
        return self._items.get(key, default)

    def set(self, key, value):
        """Set value for key, validating it if key is an option."""
        option = self._options.get(key)
        if option is not None:
            option.validate(value)
        self._items[key] = value

    def add_option(self, option):
        """Add `option` to the group, with its default value."""
        self._options[option.name] = option
        self._items[option.name] = option.default

    def __getitem__(self, key):
        """Get value for key."""
        return self._items[key]

    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)
        try:
            return self._items[attr]
        except KeyError:
            raise AttributeError(attr) from None

    def add_group(self, name):
        """Add a new configuration group."""
        group = _ConfigGroup(name)
        self._items[name] = group
        return group

    def update(self, other, path=None):
        """Update self with values from other."""
        for key, value in other.items():
            if path is None:
                sub_path = key
            else:
                sub_path = path + '.' + key

            if key not in self._items:
                raise ValueError('Invalid configuration key/group "{}"'.format(sub_path))

            own_value = self._items[key]
            if isinstance(own_value, _ConfigGroup):
                if not isinstance(value, dict):
                    raise ValueError('Configuration group "{}" expects a table'.format(sub_path))
                own_value.update(value, path=sub_path)
            else:
                self.set(key, value)


class FloatCmpConfig(object):
    """floatcmp Configuration object."""
    def __init__(self):
        self._config = _ConfigGroup('root')

    def add_group(self, name):
        """Add a new configuration group."""
        return self._config.add_group(name)

    def __getitem__(self, key):
        """Get configuration group for key. Raise KeyError if not present."""
        return self._config[key]

    def __getattr__(self, attr):
        """Get configuration group for key. Raise AttributeError if not present."""
        if attr.startswith('_'):
            raise AttributeError(attr)
        return getattr(self._config, attr)

    def update(self, other):
        """Update config with other."""
        self._config.update(other)
