"""Configuration loading from the environment and an optional .env file."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from git_diff_analyzer.errors import ConfigError

PLACEHOLDER_API_KEYS = frozenset(
    {
        "your_openai_api_key_here",
        "your_anthropic_api_key_here",
    }
)

OPENAI_PROVIDERS = ("openai", "gpt")
ANTHROPIC_PROVIDERS = ("anthropic", "claude")

DEFAULT_OPENAI_MODEL = "gpt-4-turbo"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"


def _load_env_file(env_file: Path | None = None) -> None:
    """Load environment variables from a .env file."""
    if env_file is not None:
        if not env_file.is_file():
            raise ConfigError(f"Environment file not found: {env_file}")
        load_dotenv(env_file)
        return

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        load_dotenv(default_env)


def _read_number(name: str, default: float, cast: type) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a {cast.__name__}, got '{raw}'") from None


def normalize_provider(provider: str) -> str:
    """
    Map a provider alias to its canonical name.

    Raises:
        ConfigError: If the provider is not supported
    """
    value = provider.strip().lower()
    if value in OPENAI_PROVIDERS:
        return "openai"
    if value in ANTHROPIC_PROVIDERS:
        return "anthropic"
    raise ConfigError(
        f"Invalid LLM_PROVIDER: {provider}. "
        "Supported values: 'openai', 'gpt', 'anthropic', 'claude'"
    )


@dataclass(frozen=True)
class LLMSettings:
    """Settings for the summarization API.

    Attributes:
        provider: Canonical provider name ("openai" or "anthropic")
        api_key: Bearer credential for the provider
        model: Chat model name
        temperature: Sampling temperature
        max_tokens: Upper bound on generated tokens
        timeout: Seconds to wait for the API response
    """

    provider: str
    api_key: str = field(repr=False)
    model: str
    temperature: float = 0.3
    max_tokens: int = 4000
    timeout: float = 120.0

    def __post_init__(self) -> None:
        """Validate the credential."""
        if not self.api_key or not self.api_key.strip():
            raise ConfigError(
                f"An API key is required for provider '{self.provider}'. "
                "Please set it in a .env file or as an environment variable."
            )
        if self.api_key in PLACEHOLDER_API_KEYS:
            raise ConfigError(
                f"The API key for provider '{self.provider}' is still the placeholder "
                f"'{self.api_key}'. Replace it with a real key."
            )


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration for the analyzer."""

    llm: LLMSettings
    template_path: Path | None = None

    @staticmethod
    def load(
        env_file: Path | None = None,
        provider: str | None = None,
        model: str | None = None,
        template_path: Path | None = None,
    ) -> "AppConfig":
        """
        Load configuration from the environment.

        Values already present in the process environment take precedence
        over those in the .env file. Explicit arguments take precedence over
        both.

        Args:
            env_file: Explicit .env file. Defaults to ./.env when present
            provider: Provider override (otherwise LLM_PROVIDER, then openai)
            model: Model override (otherwise OPENAI_MODEL or ANTHROPIC_MODEL)
            template_path: Custom summary template file

        Returns:
            A populated configuration object

        Raises:
            ConfigError: If the credential is missing or a value is invalid
        """
        _load_env_file(env_file)

        canonical = normalize_provider(provider or os.getenv("LLM_PROVIDER", "openai"))
        if canonical == "openai":
            key_var = "OPENAI_API_KEY"
            default_model = os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)
        else:
            key_var = "ANTHROPIC_API_KEY"
            default_model = os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL)

        api_key = os.getenv(key_var, "")
        if not api_key.strip():
            raise ConfigError(
                f"{key_var} environment variable is required. "
                "Please set it in a .env file or as an environment variable. "
                "See .env.example for reference."
            )

        if template_path is not None and not template_path.is_file():
            raise ConfigError(f"Summary template file not found: {template_path}")

        llm = LLMSettings(
            provider=canonical,
            api_key=api_key,
            model=model or default_model,
            temperature=_read_number("LLM_TEMPERATURE", 0.3, float),
            max_tokens=int(_read_number("LLM_MAX_TOKENS", 4000, int)),
            timeout=_read_number("LLM_TIMEOUT", 120.0, float),
        )
        return AppConfig(llm=llm, template_path=template_path)
