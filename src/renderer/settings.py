# renderer/settings.py
import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Quality levels, from fast previews to final renders
QUALITY_PRESETS = {
    "interactive": {"samples_per_pixel": 1, "max_depth": 4},
    "balanced": {"samples_per_pixel": 16, "max_depth": 16},
    "high_quality": {"samples_per_pixel": 100, "max_depth": 50},
}


def setup_logging(level: str = "INFO", name: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the named logger (the root logger by default).

    Calling it again replaces the level but does not stack handlers.
    """
    log = logging.getLogger(name)
    log_level = getattr(logging, level.upper(), logging.INFO)
    log.setLevel(log_level)

    if not log.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(console_handler)

    for handler in log.handlers:
        handler.setLevel(log_level)
    return log


@dataclass(frozen=True)
class TraceSettings:
    """Parameters the path estimator needs from the driver.

    Attributes:
        max_depth: Maximum number of scatter events per path; a path that
            reaches it contributes black.
        t_min: Lower bound of the accepted hit interval. Keeps scattered rays
            from re-hitting the surface they start on.
        t_max: Upper bound of the accepted hit interval.
        samples_per_pixel: How many paths the driver averages per pixel.
        seed: Seed for the driver's random generators, None for entropy.
    """

    max_depth: int = 50
    t_min: float = 0.001
    t_max: float = math.inf
    samples_per_pixel: int = 1
    seed: Optional[int] = None

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.t_min < 0:
            raise ValueError(f"t_min must be non-negative, got {self.t_min}")
        if self.t_min >= self.t_max:
            raise ValueError(f"t_min ({self.t_min}) must be below t_max ({self.t_max})")
        if self.samples_per_pixel < 1:
            raise ValueError(
                f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}"
            )

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> "TraceSettings":
        """Settings for one of QUALITY_PRESETS, with optional field overrides."""
        if name not in QUALITY_PRESETS:
            raise ValueError(
                f"Unknown quality preset {name!r}; expected one of {sorted(QUALITY_PRESETS)}"
            )
        values = dict(QUALITY_PRESETS[name])
        values.update(overrides)
        settings = cls(**values)
        logger.debug("Using %s quality: %s", name, settings)
        return settings

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "TraceSettings":
        """Build settings from a plain mapping, e.g. a parsed config file.

        A ``quality`` key selects a preset that the remaining keys override.
        Unknown keys raise ValueError.
        """
        values = dict(mapping)
        quality = values.pop("quality", None)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown trace settings: {unknown}")
        if quality is not None:
            return cls.from_preset(quality, **values)
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)
