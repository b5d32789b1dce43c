# pylint: skip-file
import pytest
from pathlib import Path
from floatcmp.config import ConfigurationManager


@pytest.fixture
def manager():
    return ConfigurationManager()


@pytest.fixture
def user_config(manager):
    user_config_path = Path(__file__).parent / 'user_config.toml'
    manager.update_configuration(str(user_config_path))
    return manager.configuration


def test_default_config(manager):
    config = manager.configuration
    assert config.logging.level == 'WARNING'
    assert not config.logging['stdout']
    assert config.logging.file is None


def test_user_config_overrides_existing_keys(user_config):
    assert user_config.logging.level == 10
    assert user_config.logging.stdout


def test_user_config_keeps_defaults_of_missing_keys(user_config):
    assert user_config.logging.file is None


def test_update_from_dict(manager):
    manager.update_configuration({'logging': {'level': 'DEBUG'}})
    assert manager.configuration.logging.level == 'DEBUG'


def test_unknown_group_is_rejected(manager):
    with pytest.raises(ValueError):
        manager.update_configuration({'tolerance': {'ulps': 8}})


def test_unknown_key_is_rejected(manager):
    with pytest.raises(ValueError):
        manager.update_configuration({'logging': {'max_ulps_diff': 8}})


@pytest.mark.parametrize('key,value', [
    ('level', 'LOUD'),
    ('level', -1),
    ('stdout', 'yes'),
    ('file', 42),
])
def test_invalid_values_are_rejected(manager, key, value):
    with pytest.raises(ValueError):
        manager.update_configuration({'logging': {key: value}})


def test_group_expects_a_table(manager):
    with pytest.raises(ValueError):
        manager.update_configuration({'logging': 'DEBUG'})


def test_missing_key_raises_attribute_error(manager):
    with pytest.raises(AttributeError):
        manager.configuration.logging.missing


def test_groups_can_be_read_by_key(user_config):
    logging_group = user_config['logging']
    assert logging_group['level'] == 10
    assert logging_group.get('file', 'missing') is None
