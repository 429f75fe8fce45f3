"""Translation behaviour settings."""

from pydantic import Field, field_validator

from translation_kv.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation lookup configuration.

    Environment Variables:
        I18N_DEFAULT_SEPARATOR: Key separator used when none is given (default: ".")
        I18N_ESCAPE_KEYS: Escape the separator inside key segments on write (default: true)
        I18N_WARN_DEPRECATED_SYNTAX: Log a warning for {{name}} placeholders (default: true)

    Example:
        ```python
        from translation_kv.configuration import settings

        separator = settings.i18n.I18N_DEFAULT_SEPARATOR
        ```
    """

    I18N_DEFAULT_SEPARATOR: str = Field(default=".", alias="I18N_DEFAULT_SEPARATOR")
    I18N_ESCAPE_KEYS: bool = Field(default=True, alias="I18N_ESCAPE_KEYS")
    I18N_WARN_DEPRECATED_SYNTAX: bool = Field(
        default=True, alias="I18N_WARN_DEPRECATED_SYNTAX"
    )

    @field_validator("I18N_DEFAULT_SEPARATOR")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Reject an empty separator."""
        if not v:
            raise ValueError("I18N_DEFAULT_SEPARATOR must not be empty")
        return v
