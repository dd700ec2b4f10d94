"""Host configuration."""

from dataclasses import dataclass
from typing import Optional, Sequence

from omegaconf import OmegaConf


@dataclass
class HostConfig:
    """Settings for running a program.

    ``ticks_per_frame`` controls instruction throughput; timers always decay
    in real time whatever its value.
    """
    ticks_per_frame: int = 10
    fps: int = 60
    scale: int = 10
    color_scheme: str = "classic"
    seed: int = 0
    log_level: str = "WARNING"
    headless: bool = False
    frames: int = 600
    screenshot: Optional[str] = None


def load_config(overrides: Sequence[str] = ()) -> HostConfig:
    """Build a config from defaults plus ``key=value`` overrides.

    Raises:
        omegaconf.errors.OmegaConfBaseException: on unknown keys or bad values.
    """
    schema = OmegaConf.structured(HostConfig)
    cfg = OmegaConf.merge(schema, OmegaConf.from_dotlist(list(overrides)))
    if cfg.ticks_per_frame < 1:
        raise ValueError(f"ticks_per_frame must be positive, got {cfg.ticks_per_frame}")
    if cfg.fps < 1:
        raise ValueError(f"fps must be positive, got {cfg.fps}")
    return OmegaConf.to_object(cfg)
