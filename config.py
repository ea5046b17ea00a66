import os
from dotenv import load_dotenv


class ConfigError(Exception):
    """Missing or invalid database configuration"""


class Config:
    REQUIRED_VARS = ('DB_HOST', 'DB_PORT', 'DB_USER', 'DB_PASSWORD', 'DB_NAME')

    def __init__(self, db_host, db_port, db_user, db_password, db_name):
        self.db_host = db_host
        self.db_port = db_port
        self.db_user = db_user
        self.db_password = db_password
        self.db_name = db_name

    @classmethod
    def from_env(cls, env=None):
        """Build config from environment (seeded from .env if present)"""
        if env is None:
            load_dotenv()
            env = os.environ

        missing = [name for name in cls.REQUIRED_VARS if not env.get(name)]
        if missing:
            raise ConfigError(f"Missing environment variables: {', '.join(missing)}")

        try:
            port = int(env['DB_PORT'])
        except ValueError:
            raise ConfigError(f"DB_PORT must be an integer, got '{env['DB_PORT']}'")
        if not 1 <= port <= 65535:
            raise ConfigError(f"DB_PORT out of range: {port}")

        return cls(
            db_host=env['DB_HOST'],
            db_port=port,
            db_user=env['DB_USER'],
            db_password=env['DB_PASSWORD'],
            db_name=env['DB_NAME'],
        )

    def connect_kwargs(self):
        return {
            'host': self.db_host,
            'port': self.db_port,
            'user': self.db_user,
            'password': self.db_password,
            'dbname': self.db_name,
        }

    def __repr__(self):
        return f"Config(host={self.db_host}, port={self.db_port}, user={self.db_user}, dbname={self.db_name})"
