import logging
import os
import yaml
from cerberus import Validator
from deepmerge import always_merger
from active24dns.constants import (
    CONFIGURATION_SCHEMA,
    DEFAULT_ENDPOINT_URL,
    ENV_API_KEY,
    ENV_API_URL,
)
from active24dns.errors import ConfigurationError

ENVIRONMENT_KEYS = {
    ENV_API_KEY: "api_key",
    ENV_API_URL: "api_url",
}


class Config:
    __slots__ = ("_api_key", "_endpoint")

    def __init__(self, api_key, endpoint=DEFAULT_ENDPOINT_URL):
        if not api_key:
            raise ConfigurationError(
                f"some credentials information are missing: {ENV_API_KEY}"
            )
        object.__setattr__(self, "_api_key", api_key)
        object.__setattr__(self, "_endpoint", endpoint)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def api_key(self):
        return self._api_key

    @property
    def endpoint(self):
        return self._endpoint

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return (self.api_key, self.endpoint) == (other.api_key, other.endpoint)

    def __hash__(self):
        return hash((self.api_key, self.endpoint))

    def __repr__(self):
        return f"Config(api_key='***', endpoint={self.endpoint!r})"


def read_environment(environ):
    params = {}
    for env_name, key in ENVIRONMENT_KEYS.items():
        if environ.get(env_name):
            logging.debug(f"Using {key} from {env_name} environment variable.")
            params[key] = environ[env_name]
    return params


def read_config_file(config_file):
    logging.info(f"Loading configuration from {config_file}")
    try:
        with open(config_file) as file:
            params = yaml.safe_load(file)
    except OSError as e:
        raise ConfigurationError(f"Could not open configuration file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse configuration file: {e}") from e
    if params is None:
        return {}
    if not isinstance(params, dict):
        raise ConfigurationError(f"Configuration file {config_file} is not a mapping.")
    return params


def load_config(config_file=None, environ=None):
    """
    Builds the provider configuration. Environment variables take precedence
    over the optional YAML configuration file.
    """
    if environ is None:
        environ = os.environ

    params = read_config_file(config_file) if config_file else {}
    params = always_merger.merge(params, read_environment(environ))

    if not params.get("api_key"):
        raise ConfigurationError(
            f"some credentials information are missing: {ENV_API_KEY}"
        )

    v = Validator(CONFIGURATION_SCHEMA, purge_unknown=True)
    if not v.validate(params):
        logging.error("Configuration is invalid.")
        raise ConfigurationError(f"Issues found in configuration: {v.errors}")
    params = v.document
    logging.debug("Configuration is valid.")

    return Config(params["api_key"], endpoint=params["api_url"])
