# pylint: skip-file
import logging
import pytest
import floatcmp
from floatcmp.ieee754 import FloatCmp
from floatcmp.logging import get_logger


def _stream_handlers(logger):
    return [
        h for h in logger.handlers
        if type(h) is logging.StreamHandler
    ]


def test_get_logger_returns_children_of_floatcmp():
    assert get_logger().name == 'floatcmp'
    assert get_logger('floatcmp').name == 'floatcmp'
    assert get_logger('floatcmp.ieee754').name == 'floatcmp.ieee754'
    assert get_logger('plugin').name == 'floatcmp.plugin'


def test_comparison_decisions_are_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger='floatcmp'):
        FloatCmp(1.0).almost_equal(2.0)
    messages = [r.getMessage() for r in caplog.records]
    assert any('ULPS_EXCEEDED' in m for m in messages)


def test_comparison_decisions_are_not_logged_by_default(caplog):
    floatcmp.configure()
    FloatCmp(1.0).almost_equal(2.0)
    assert not [r for r in caplog.records if r.name.startswith('floatcmp')]


def test_apply_config_sets_level_and_stdout(default_logging):
    floatcmp.configure({'logging': {'level': 'ERROR', 'stdout': True}})
    logger = get_logger()
    assert logger.level == logging.ERROR
    assert len(_stream_handlers(logger)) == 1


def test_apply_config_twice_does_not_duplicate_handlers(default_logging):
    floatcmp.configure({'logging': {'stdout': True}})
    floatcmp.configure({'logging': {'stdout': True}})
    assert len(_stream_handlers(get_logger())) == 1


def test_apply_config_logs_to_file(tmp_path, default_logging):
    path = tmp_path / 'floatcmp.log'
    floatcmp.configure({'logging': {'level': 'DEBUG', 'file': str(path)}})
    FloatCmp(1.0).almost_equal(float('nan'))
    floatcmp.configure()
    assert 'NAN' in path.read_text()
