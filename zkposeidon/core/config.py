"""
Configuration for zkposeidon.

Defines the Poseidon instance (width, round schedule, S-box), the
transcript label shared by prover and verifier, and logging options.
Values come from defaults, then a .env file, then ZKPOSEIDON_* environment
variables, then explicit overrides.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional, Union

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, field_validator

from zkposeidon.poseidon.params import PoseidonParams
from zkposeidon.poseidon.sbox import SboxType

ENV_PREFIX = "ZKPOSEIDON_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PoseidonConfig(BaseModel):
    """Poseidon instance and runtime configuration"""

    model_config = ConfigDict(frozen=True)

    # Permutation shape
    width: int = Field(default=6, gt=0)
    full_rounds_beginning: int = Field(default=4, ge=0)
    full_rounds_end: int = Field(default=4, ge=0)
    partial_rounds: int = Field(default=140, ge=0)
    sbox: Literal["cube", "inverse"] = "cube"

    # Proving
    transcript_label: str = Field(default="zkposeidon", min_length=1)

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    log_to_file: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def total_rounds(self) -> int:
        return self.full_rounds_beginning + self.partial_rounds + self.full_rounds_end

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def sbox_type(self) -> SboxType:
        return SboxType(self.sbox)

    def build_params(self) -> PoseidonParams:
        """
        Build Poseidon parameters from the bundled constant tables.

        Raises:
            PoseidonParamsError: If the tables cannot serve this configuration
        """
        return PoseidonParams.new(
            self.width,
            self.full_rounds_beginning,
            self.full_rounds_end,
            self.partial_rounds,
        )


# Global config instance (can be overridden)
config = PoseidonConfig()


def load_config(
    env_file: Optional[Union[str, Path]] = None,
    **overrides,
) -> PoseidonConfig:
    """
    Load configuration from a .env file, the environment and overrides.

    Args:
        env_file: Path to a .env file. If None, uses ./.env when present
        **overrides: Field values that win over everything else (None is ignored)

    Returns:
        PoseidonConfig instance

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    path = Path(env_file) if env_file else Path.cwd() / ".env"
    sources = {}
    if path.is_file():
        sources.update(dotenv_values(path))
    sources.update(os.environ)

    values = {}
    for name in PoseidonConfig.model_fields:
        key = ENV_PREFIX + name.upper()
        if sources.get(key) is not None:
            values[name] = sources[key]

    values.update({k: v for k, v in overrides.items() if v is not None})
    return PoseidonConfig(**values)
