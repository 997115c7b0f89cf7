"""Configuration for a checker run."""

from pathlib import Path
from typing import Annotated, Any, Self

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    ValidationError,
    field_validator,
)

from pythcheck.errors import ConfigError


def _validate_path_required(v: str | Path | None) -> Path:
    """Validate that path is provided and convert to Path object."""
    if v is None:
        raise ValueError("path is required")

    if isinstance(v, str):
        if not v.strip():
            raise ValueError("path is required")
        path_obj = Path(v.strip())
    else:
        path_obj = v

    if not path_obj.exists():
        raise ValueError(f"Path does not exist: {path_obj}")
    if not (path_obj.is_file() or path_obj.is_dir()):
        raise ValueError(f"Path must be a file or directory: {path_obj}")

    return path_obj


class CheckerConfig(BaseModel):
    """Configuration for a checker run with Pydantic validation."""

    path: Annotated[Path, BeforeValidator(_validate_path_required)] = Field(
        description="File or directory to check"
    )
    ignore_hidden: bool = Field(
        default=False,
        description="Skip files and directories whose name starts with '.'",
    )
    ignore_tests: bool = Field(
        default=False,
        description="Skip 'tests' directories and 'test_*' files",
    )
    ignore_return: bool = Field(
        default=False,
        description="Do not report missing return types",
    )
    exclude_patterns: list[str] | None = Field(
        default=None,
        description="Gitwildmatch patterns to exclude, relative to path",
    )
    max_workers: int | None = Field(
        default=None,
        description="Worker threads, None = one per CPU",
        gt=0,
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of source files",
    )
    extension: str = Field(
        default=".py",
        description="Suffix candidate files must have",
    )

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate that the extension is a dotted suffix."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"extension must look like '.py', got: {v!r}")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to Python."""
        try:
            "".encode(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from raw properties.

        Args:
            properties: Raw configuration values

        Returns:
            Validated configuration object

        Raises:
            ConfigError: If validation fails or required properties are missing

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            for error in e.errors():
                if error["loc"] == ("path",) and error["type"] == "missing":
                    raise ConfigError("path is required") from e
            messages = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise ConfigError(f"Invalid checker configuration: {messages}") from e
