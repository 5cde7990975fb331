"""
Configuration schema and validation logic for the precision pipeline.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, ValidationError
from typing import List, Optional
import os
import yaml


# -------------------------------
# Analyzed column
# -------------------------------
class ColumnConfig(BaseModel):
    column: str
    hierarchy: str

    @field_validator("column")
    def validate_column(cls, v):
        if not v.strip():
            raise ValueError("Column name must not be empty.")
        return v

    @field_validator("hierarchy")
    def validate_hierarchy(cls, v):
        if not os.path.isfile(v):
            raise ValueError(f"Hierarchy file does not exist: {v}")
        return v


# -------------------------------
# Main Config Object
# -------------------------------
class Config(BaseModel):
    data_path: str
    columns: List[ColumnConfig] = Field(default_factory=list)
    suppression_string: str = "*"
    hierarchy_delimiter: str = ";"
    output_path: Optional[str] = None
    log_file: str = "log.txt"
    show_progress: bool = False

    @field_validator("data_path")
    def validate_data_path(cls, v):
        if not os.path.isfile(v):
            raise ValueError(f"Data file does not exist: {v}")
        return v

    @field_validator("hierarchy_delimiter")
    def validate_delimiter(cls, v):
        if len(v) != 1:
            raise ValueError(f"hierarchy_delimiter must be a single character. Found '{v}'.")
        return v

    @model_validator(mode="after")
    def check_columns(self):
        if len(self.columns) == 0:
            raise ValueError("At least one column must be analyzed.")

        names = [c.column for c in self.columns]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Columns listed more than once: {duplicates}")

        return self

    @model_validator(mode="after")
    def validate_paths(self):
        # Log file directory
        log_dir = os.path.dirname(self.log_file)
        if log_dir and not os.path.isdir(log_dir):
            raise ValueError(f"Log directory does not exist: {log_dir}")

        # Output file parent check
        if self.output_path:
            out_dir_check = os.path.dirname(self.output_path)
            if out_dir_check and not os.path.isdir(out_dir_check):
                raise ValueError(f"Directory for output_path does not exist: {out_dir_check}")

        return self


# -------------------------------
# Config Loader Function
# -------------------------------
def load_config(config_path: str):
    """
    Load and validate YAML configuration with proper error handling.
    """
    if not isinstance(config_path, str):
        raise TypeError("Config path must be a string.")

    if not os.path.isfile(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # --- Read YAML safely ---
    try:
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}")
    except Exception as e:
        raise RuntimeError(f"Unable to read config file '{config_path}': {e}")

    if not isinstance(config_data, dict):
        raise ValueError("Config file must contain a valid YAML dictionary.")

    # --- Validate using Pydantic ---
    try:
        return Config(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration structure: {e}") from e
