"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use DOCDIRECTIVES_ prefix (e.g., DOCDIRECTIVES_DEFAULT_LANG=en-US).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use DOCDIRECTIVES_ prefix.

    Examples:
        DOCDIRECTIVES_DEFAULT_LANG=en-US
        DOCDIRECTIVES_FILE_PATTERN=**/docs/*.{lang}.md
        DOCDIRECTIVES_JSON_INDENT=0
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCDIRECTIVES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Discovery configuration
    default_lang: str = Field(
        default="zh-CN",
        description="Locale code of the documentation pages (zone is the part before '-')",
    )

    file_pattern: str = Field(
        default="**/doc/index.{lang}.md",
        description="Glob (relative to inputdir) matching documentation pages; {lang} is substituted",
    )

    # Parser configuration
    markdown_preset: str = Field(
        default="js-default",
        description="markdown-it-py preset used to tokenize pages (must enable tables)",
    )

    # Output configuration
    output_name: str = Field(
        default="directives.{lang}.json",
        description="Output filename written to outputdir; {lang} is substituted",
    )

    json_indent: int = Field(
        default=2,
        description="Indentation of the JSON output (0 for compact)",
    )

    def filePattern_make(self, lang: str, pattern: str | None = None) -> str:
        """
        Build the discovery glob for a locale.

        Args:
            lang: Locale code (e.g., "en-US")
            pattern: Optional override of file_pattern

        Returns:
            Glob string with {lang} substituted

        Example:
            >>> settings = AppSettings()
            >>> settings.filePattern_make('en-US')
            '**/doc/index.en-US.md'
        """
        return (pattern or self.file_pattern).replace("{lang}", lang)

    def outputName_make(self, lang: str, name: str | None = None) -> str:
        """
        Build the output filename for a locale.

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make('zh-CN')
            'directives.zh-CN.json'
        """
        return (name or self.output_name).replace("{lang}", lang)


# Singleton instance - import this in your code
appsettings = AppSettings()
