"""Match configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from tankarena.core.errors import ConfigError

# The RNG hashes the seed as a signed 64-bit integer.
SEED_MIN = -(1 << 63)
SEED_MAX = (1 << 63) - 1


@dataclass(frozen=True)
class ArenaConfig:
    """Immutable configuration for building one match."""

    # World
    world_seed: int = 42
    asset_root: str = "assets"

    # Map selection: None draws a random file from <asset_root>/maps/
    selected_map: str | None = None
    reject_single_spawn: bool = False

    # Rendering: False builds the headless (physics-only) world
    render_mode: bool = False

    # Frame loop
    max_frames: int = 600

    # Logging / output
    log_level: str = "INFO"
    dump_file: str | None = None

    def __post_init__(self) -> None:
        if not SEED_MIN <= self.world_seed <= SEED_MAX:
            raise ConfigError(f"world_seed {self.world_seed} is outside the signed 64-bit range")
        if self.max_frames < 1:
            raise ConfigError(f"max_frames must be positive, got {self.max_frames}")
