# System
import pathlib as pl
import typing as ty

# Third Party
import pydantic as pc
import pydantic_settings as ps

# Internal
from .registry import SnapshotKind


class Settings(ps.BaseSettings):
    """lightcolor configuration, read from LIGHTCOLOR_* variables and a TOML file."""

    model_config = ps.SettingsConfigDict(env_prefix="LIGHTCOLOR_")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        config_file = getattr(cls, "_config_file", None)

        sources = [init_settings, env_settings]

        if config_file is not None:
            sources.append(
                ps.TomlConfigSettingsSource(settings_cls, toml_file=config_file)
            )

        return tuple(sources)

    registry_directory: pl.Path = pc.Field(
        default=pl.Path("./colors"),
        description="Base directory of the color snapshot registry",
    )
    log_level: ty.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = pc.Field(
        default="WARNING", description="Logging level of the command line tool"
    )
    default_kind: SnapshotKind = pc.Field(
        default=SnapshotKind.DUMPS,
        description="Registry collection used when none is given",
    )

    @classmethod
    def load(cls, config_file: pl.Path | str | None = None) -> "Settings":
        """Create settings, optionally layering a TOML config file under the environment."""
        cls._config_file = config_file
        try:
            return cls()
        finally:
            if "_config_file" in cls.__dict__:
                delattr(cls, "_config_file")
