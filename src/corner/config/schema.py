"""Pydantic models for configuration schema."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.registry import DEFAULT_HELPFUL_MESSAGE, DEFAULT_SUPPORT_LINK
from ..core.stack_capture import DEFAULT_MAX_DEPTH
from ..models.snippet import Decoration, is_http_url


class DecorationConfig(BaseModel):
    """Helpful message and support link of one error variant."""

    helpful_message: str = Field(min_length=1)
    support_link: str

    @field_validator("helpful_message")
    @classmethod
    def validate_helpful_message(cls, v: str) -> str:
        """Reject whitespace-only messages."""
        if not v.strip():
            raise ValueError("helpful_message must not be blank")
        return v

    @field_validator("support_link")
    @classmethod
    def validate_support_link(cls, v: str) -> str:
        """Validate support link is an http(s) URL."""
        if not is_http_url(v):
            raise ValueError(f"Invalid support link: {v}. Expected an http(s) URL")
        return v

    def to_decoration(self) -> Decoration:
        """Convert to the immutable runtime model."""
        return Decoration(helpful_message=self.helpful_message, support_link=self.support_link)


class SnippetConfig(BaseModel):
    """Snippet extraction configuration."""

    cache_max_files: int | None = Field(None, ge=1, description="Max cached source files")
    max_stack_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, le=1000)
    encoding: str = "utf-8"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"


class CornerConfig(BaseSettings):
    """Root configuration for corner."""

    variants: dict[str, DecorationConfig] = {}
    default_decoration: DecorationConfig = DecorationConfig(
        helpful_message=DEFAULT_HELPFUL_MESSAGE,
        support_link=DEFAULT_SUPPORT_LINK,
    )
    snippet: SnippetConfig = SnippetConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="CORNER_",
        env_nested_delimiter="__",
    )
