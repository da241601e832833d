"""Process-wide default values for linter options.

A directory's configuration only holds the options it sets explicitly;
everything else falls back to these defaults. ``LinterSettings`` lets a
deployment override the defaults through ``SCHEMALINT_*`` environment
variables or a ``.env`` file, without touching any directory configuration.

Examples:
    >>> from schemalint.core.settings import LinterSettings
    >>> LinterSettings().option_defaults()["allow-engine"]
    'innodb'

Tags:
    settings, configuration, pydantic, environment, schemalint
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Option name -> default value, for directory configs built without settings
DEFAULT_OPTIONS: dict[str, str] = {
    "warnings": "no-pk,bad-charset,bad-engine",
    "errors": "",
    "allow-charset": "latin1,utf8mb4",
    "allow-engine": "innodb",
    "ignore-schema": "",
    "ignore-table": "",
    "schema": "",
}


class LinterSettings(BaseSettings):
    """Default linter options plus logging setup.

    Fields
    ──────
    warnings       : Problems reported as warnings (non-fatal)
    errors         : Problems treated as fatal errors
    allow_charset  : Acceptable character sets
    allow_engine   : Acceptable storage engines
    ignore_schema  : Regexp of schema names to skip
    ignore_table   : Regexp of table names to skip
    log_level      : Structlog log level
    log_json       : JSON log output; None auto-detects from the tty
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMALINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Linter options ───────────────────────────────────────────
    warnings: str = Field(
        default=DEFAULT_OPTIONS["warnings"],
        description="Linter problems to display as warnings (non-fatal)",
    )
    errors: str = Field(
        default=DEFAULT_OPTIONS["errors"],
        description="Linter problems to treat as fatal errors",
    )
    allow_charset: str = Field(
        default=DEFAULT_OPTIONS["allow-charset"],
        description="Whitelist of acceptable character sets",
    )
    allow_engine: str = Field(
        default=DEFAULT_OPTIONS["allow-engine"],
        description="Whitelist of acceptable storage engines",
    )
    ignore_schema: str = ""
    ignore_table: str = ""

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None

    def option_defaults(self) -> dict[str, str]:
        """Return the linter options keyed by their option names."""
        defaults = dict(DEFAULT_OPTIONS)
        defaults.update(
            {
                "warnings": self.warnings,
                "errors": self.errors,
                "allow-charset": self.allow_charset,
                "allow-engine": self.allow_engine,
                "ignore-schema": self.ignore_schema,
                "ignore-table": self.ignore_table,
            }
        )
        return defaults
