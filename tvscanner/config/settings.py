"""Configuration management for the scanner client."""

from pydantic import Field
from pydantic_settings import BaseSettings


class ScannerSettings(BaseSettings):
    """Client settings loaded from environment variables (prefix TVSCANNER_)."""

    # Scanner API Configuration
    api_url: str = Field(
        default="https://scanner.tradingview.com/",
        description="Scanner API base URL (with trailing slash)"
    )
    default_screener: str = Field(
        default="crypto",
        description="Screener used when a call passes an empty screener"
    )
    api_postfix: str = Field(
        default="scan",
        description="Endpoint appended after the screener"
    )

    # HTTP-Client Timeouts
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Upper bound for a single scanner request"
    )

    # Diagnostics
    debug: bool = Field(
        default=False,
        description="Dump requests, responses and computed signals"
    )
    log_level: str = Field(default="INFO")

    user_agent: str = Field(
        default="tvscanner",
        description="User-Agent product token; the version is appended"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TVSCANNER_",
        "extra": "ignore"
    }

    def scan_url(self, screener: str = "") -> str:
        """Build the scan endpoint URL for a screener."""
        return f"{self.api_url}{screener or self.default_screener}/{self.api_postfix}"


settings = ScannerSettings()
