import os

import boto3
from dotenv import load_dotenv


DEFAULT_REGION = 'us-east-1'

# primary name first, legacy fallback second
ACCESS_KEY_VARS = ('AWS_ACCESS_KEY_ID', 'AWS_ACCESS_KEY')
SECRET_KEY_VARS = ('AWS_SECRET_ACCESS_KEY', 'AWS_SECRET_KEY')
REGION_VAR = 'AWS_REGION'


class ConfigError(Exception):
    pass


def first_set(names, environ):
    for name in names:
        value = environ.get(name)
        if value:
            return value

    return None


class Config:
    def __init__(self, access_key_id, secret_access_key, region=DEFAULT_REGION):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.region = region

    def __repr__(self):
        # never print the secret
        return f'Config(access_key_id={self.access_key_id!r}, region={self.region!r})'

    @classmethod
    def from_env(cls, environ=None, dotenv_path='.env.private'):
        """Resolve credentials and region.

        Values in ``dotenv_path`` are loaded into the process environment
        first but never override variables that are already set.
        """
        if environ is None:
            load_dotenv(dotenv_path)
            environ = os.environ

        access_key_id = first_set(ACCESS_KEY_VARS, environ)
        secret_access_key = first_set(SECRET_KEY_VARS, environ)

        missing = []
        if not access_key_id:
            missing.append(' or '.join(ACCESS_KEY_VARS))
        if not secret_access_key:
            missing.append(' or '.join(SECRET_KEY_VARS))

        if missing:
            raise ConfigError(f'missing required environment variables: {", ".join(missing)}')

        region = environ.get(REGION_VAR) or DEFAULT_REGION

        return cls(access_key_id, secret_access_key, region)


def make_client(config):
    # https://boto3.readthedocs.io/en/latest/reference/services/lambda.html
    return boto3.client(
        'lambda',
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        region_name=config.region,
    )
