import tempfile
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from .values import EmptyValuePolicy


class ConversionSettings(BaseSettings):
    empty_value_policy: EmptyValuePolicy = EmptyValuePolicy.NULL
    # Headers like "XX.name" are read as "XX[].name".
    legacy_array_prefix: str = "XX"

class ExportSettings(BaseSettings):
    output_dir: Path = Path(tempfile.gettempdir())
    default_filename: str = "tree_output"
    json_indent: int = 2

class UISettings(BaseSettings):
    title: str = "Table Tree Converter"
    preview_rows: int = 200  # Table preview cap; conversion always uses every row

class LoggingSettings(BaseSettings):
    level: str = "INFO"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TABLE_TREE_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )
    conversion: ConversionSettings = ConversionSettings()
    export: ExportSettings = ExportSettings()
    ui: UISettings = UISettings()
    logging: LoggingSettings = LoggingSettings()

settings = Settings()
