import pytest

import config
from config import Config, ConfigError


def test_from_env(db_env):
    cfg = Config.from_env(db_env)
    assert cfg.connect_kwargs() == {
        'host': 'db.local',
        'port': 5432,
        'user': 'metrics',
        'password': 's3cret',
        'dbname': 'telemetry',
    }


def test_missing_variables_are_listed(db_env):
    del db_env['DB_USER']
    db_env['DB_NAME'] = ''
    with pytest.raises(ConfigError) as exc:
        Config.from_env(db_env)
    assert 'DB_USER' in str(exc.value)
    assert 'DB_NAME' in str(exc.value)


@pytest.mark.parametrize('port', ['abc', '0', '70000'])
def test_invalid_port(db_env, port):
    db_env['DB_PORT'] = port
    with pytest.raises(ConfigError):
        Config.from_env(db_env)


def test_reads_process_environment(monkeypatch, db_env):
    monkeypatch.setattr(config, 'load_dotenv', lambda: False)
    for name, value in db_env.items():
        monkeypatch.setenv(name, value)

    cfg = Config.from_env()
    assert cfg.db_host == 'db.local'
    assert cfg.db_port == 5432


def test_repr_hides_password(db_env):
    assert 's3cret' not in repr(Config.from_env(db_env))
