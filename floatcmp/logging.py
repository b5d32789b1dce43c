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
"""Log comparison decisions through the standard library logger."""
import logging


CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
DEBUG = logging.DEBUG
NOTSET = logging.NOTSET

ROOT_LOGGER_NAME = 'floatcmp'


# pylint: disable=invalid-name
_logger = logging.getLogger(ROOT_LOGGER_NAME)
_logger.addHandler(logging.NullHandler())
_handlers = []

debug = _logger.debug
info = _logger.info
warning = _logger.warning
error = _logger.error
log = _logger.log


def get_logger(name=None):
    """Return the floatcmp logger, or its child called `name`.

    Parameters
    ----------
    name : str or None
        logger name, usually the caller `__name__`
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return _logger
    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = ROOT_LOGGER_NAME + '.' + name
    return logging.getLogger(name)


def apply_config(config):
    """Apply the `logging` group of `config` to the floatcmp logger.

    Handlers installed by a previous call are removed first, so applying
    the same configuration twice does not duplicate output.
    """
    config = config.logging

    level = config.get('level', 'INFO')
    if isinstance(level, str):
        level = logging.getLevelName(level)
    _logger.setLevel(level)

    while _handlers:
        handler = _handlers.pop()
        _logger.removeHandler(handler)
        handler.close()

    if config.get('stdout', False):
        _install_handler(logging.StreamHandler())

    if config.get('file') is not None:
        _install_handler(logging.FileHandler(config['file']))


def _install_handler(handler):
    handler.setFormatter(
        logging.Formatter('%(asctime)s %(name)s %(levelname)s %(message)s')
    )
    _logger.addHandler(handler)
    _handlers.append(handler)
