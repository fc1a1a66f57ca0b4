"""Configuration loader for good-count."""

from dataclasses import dataclass

from dotenv import load_dotenv

from common.config import ConfigSingleton, env_flag, env_str
from good_count.errors import ConfigurationError

PROVIDER_ENV = "GOOD_COUNT_PROVIDER"
PROPAGATE_PROVIDER_ERRORS_ENV = "GOOD_COUNT_PROPAGATE_PROVIDER_ERRORS"
LOG_LEVEL_ENV = "GOOD_COUNT_LOG_LEVEL"


@dataclass(frozen=True)
class GoodCountConfig:
    provider: str | None = None  # "package.module:function"
    propagate_provider_errors: bool = False
    log_level: str = "INFO"


def load_config() -> GoodCountConfig:
    """Load configuration from the environment (and a local .env file).

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    load_dotenv()

    try:
        propagate = env_flag(PROPAGATE_PROVIDER_ERRORS_ENV)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    return GoodCountConfig(
        provider=env_str(PROVIDER_ENV),
        propagate_provider_errors=propagate,
        log_level=env_str(LOG_LEVEL_ENV, "INFO"),
    )


_manager = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
