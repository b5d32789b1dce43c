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
"""Almost equality of IEEE-754 floating point numbers."""
from floatcmp.__version__ import __version__
from floatcmp.error import UnsupportedWidthError, MixedWidthError
from floatcmp.type_with_size import TypeWithSize, type_with_size
from floatcmp.ieee754 import (
    Comparison,
    IEEE754,
    FloatCmp,
    DoubleCmp,
    float_cmp,
    double_cmp,
    comparator_for,
)
from floatcmp.config import ConfigurationManager
from floatcmp.logging import apply_config, get_logger


__all__ = [
    '__version__',
    'UnsupportedWidthError', 'MixedWidthError',
    'TypeWithSize', 'type_with_size',
    'Comparison', 'IEEE754', 'FloatCmp', 'DoubleCmp', 'float_cmp', 'double_cmp',
    'comparator_for', 'configure', 'get_logger',
]


def configure(user_config=None):
    """Build the floatcmp configuration and apply it to the logger.

    Parameters
    ----------
    user_config : dict or str or None
        overrides of the default configuration, or the path of a TOML
        file containing them

    Returns
    -------
    FloatCmpConfig
    """
    manager = ConfigurationManager()
    if user_config is not None:
        manager.update_configuration(user_config)
    config = manager.configuration
    apply_config(config)
    return config
