import logging
import os
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = 'eachy'


@dataclass(frozen=True)
class EachyConfig:
    """library-wide defaults. operations only ever read these."""
    random_seed: Optional[int] = None   # seed for sample() when no random_state is passed
    log_level: str = 'WARNING'
    default_sum_type: type = int        # identity type for sum()/product() over an empty source

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'EachyConfig':
        """build a config from EACHY_* environment variables"""
        env = os.environ if environ is None else environ
        seed = env.get('EACHY_RANDOM_SEED')
        try:
            random_seed = int(seed) if seed not in (None, '') else None
        except ValueError:
            raise ValueError(f"EACHY_RANDOM_SEED must be an integer, got '{seed}'") from None
        return cls(
            random_seed=random_seed,
            log_level=env.get('EACHY_LOG_LEVEL', cls.log_level).upper(),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


_active = EachyConfig()


def get_config() -> EachyConfig:
    return _active


def configure(config: Optional[EachyConfig] = None, **overrides: Any) -> EachyConfig:
    """replace the active config (or patch fields of it) and apply the log level"""
    global _active
    base = config if config is not None else _active
    new_config = replace(base, **overrides) if overrides else base

    level = logging.getLevelName(new_config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: '{new_config.log_level}'")

    _active = new_config
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)
    logger.debug(f"config: {new_config.as_dict()}")
    return new_config


# EACHY_* settings take effect on import; a bad log level fails the import
configure(EachyConfig.from_env())
