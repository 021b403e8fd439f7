# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Centralized configuration with constants and dataclasses for random sampling,
# layer masks, float tolerances and logging, plus environment variable overrides
# Acknowledgements: Python logging documentation for basicConfig usage

"""Configuration for engine_devtools.

Module-level constants are the defaults; the dataclasses below bundle them
for callers that want to override settings from the environment:

- DEVTOOLS_SEED: integer seed for the shared random generator
- DEVTOOLS_LOG_LEVEL: logging level name (DEBUG, INFO, ...)
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

# Percent scale used by chance rolls (25 -> 25% chance)
CHANCE_MAX = 100.0

# Layer masks are 32-bit, layers are indexed 0..31
LAYER_COUNT = 32
ALL_LAYERS_MASK = (1 << LAYER_COUNT) - 1

# Absolute tolerance for approximate vector/quaternion comparisons
FLOAT_TOLERANCE = 1e-5

# Random generator seed (None = seeded from OS entropy)
_SEED_ENV = os.getenv("DEVTOOLS_SEED")
RANDOM_SEED: Optional[int] = int(_SEED_ENV) if _SEED_ENV else None

# Logging
LOG_LEVEL = os.getenv("DEVTOOLS_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass
class RandomConfig:
    """Shared random generator settings."""
    seed: Optional[int] = RANDOM_SEED
    chance_max: float = CHANCE_MAX

    def __post_init__(self):
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.chance_max <= 0:
            raise ValueError(f"chance_max must be positive, got {self.chance_max}")


@dataclass
class LoggingConfig:
    """Logging level and format."""
    level: str = LOG_LEVEL
    format: str = LOG_FORMAT

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in _VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level '{self.level}'. Must be one of {_VALID_LOG_LEVELS}.")


@dataclass
class DevToolsConfig:
    """Aggregated devtools configuration."""
    random: RandomConfig = field(default_factory=RandomConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, **overrides) -> "DevToolsConfig":
        """Create config with environment variable overrides."""
        config = cls()
        if "DEVTOOLS_SEED" in os.environ:
            config.random = RandomConfig(seed=int(os.environ["DEVTOOLS_SEED"]))
        if "DEVTOOLS_LOG_LEVEL" in os.environ:
            config.log = LoggingConfig(level=os.environ["DEVTOOLS_LOG_LEVEL"])
        for key, value in overrides.items():
            if hasattr(config, key):
                setattr(config, key, value)
        return config


def configure_logging(verbose: bool = False, config: Optional[LoggingConfig] = None) -> None:
    """Apply logging.basicConfig for applications and test sessions.

    Args:
        verbose: Force DEBUG level regardless of the configured level
        config: Logging settings, defaults to LoggingConfig()
    """
    config = config or LoggingConfig()
    level = logging.DEBUG if verbose else getattr(logging, config.level)
    logging.basicConfig(level=level, format=config.format)
    logging.getLogger("engine_devtools").setLevel(level)


def apply_config(config: Optional[DevToolsConfig] = None) -> DevToolsConfig:
    """Push a configuration into logging and the shared random generator.

    Args:
        config: Settings to apply, defaults to DevToolsConfig.from_env()

    Returns:
        The applied configuration
    """
    from .extensions import randomness

    config = config or DevToolsConfig.from_env()
    configure_logging(config=config.log)
    randomness.configure(config.random)
    return config
