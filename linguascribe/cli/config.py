"""
Global configuration manager for LinguaScribe CLI
Handles provider choice, API keys and model preferences
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, asdict, field, fields

from linguascribe.core.config import PROVIDER_DEFAULTS, SUPPORTED_PROVIDERS

logger = logging.getLogger(__name__)

PROVIDER_ENV_KEYS = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "openai": ("OPENAI_API_KEY",),
    "anthropic": ("ANTHROPIC_API_KEY",),
    "openrouter": ("OPENROUTER_API_KEY",),
}

PROVIDER_KEY_URLS = {
    "gemini": "https://aistudio.google.com/apikey",
    "openai": "https://platform.openai.com/api-keys",
    "anthropic": "https://console.anthropic.com/settings/keys",
    "openrouter": "https://openrouter.ai/keys",
}


@dataclass
class CLIConfig:
    """CLI configuration stored globally in ~/.linguascribe/"""

    provider: str = "gemini"
    api_keys: Dict[str, str] = field(default_factory=dict)

    model: Optional[str] = None
    media_model: Optional[str] = None

    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for JSON serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CLIConfig':
        """Create config from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigManager:
    """Manages global LinguaScribe CLI configuration"""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize config manager with global config directory"""
        self.config_dir = config_dir or Path.home() / ".linguascribe"
        self.config_file = self.config_dir / "config.json"
        self.log_file = self.config_dir / "linguascribe.log"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config = self.load_config()

    def load_config(self) -> CLIConfig:
        """Load configuration from file or create default"""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    return CLIConfig.from_dict(json.load(f))
            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config: {e}")
                return CLIConfig()

        config = CLIConfig()
        provider = os.getenv("LINGUASCRIBE_PROVIDER")
        if provider and provider.lower() in SUPPORTED_PROVIDERS:
            config.provider = provider.lower()
        return config

    def save_config(self):
        """Save current configuration to file"""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config.to_dict(), f, indent=2)
        except OSError as e:
            logger.error(f"Error saving config: {e}")

    def get_provider(self) -> str:
        return self.config.provider

    def set_provider(self, provider: str):
        """Switch provider and save"""
        provider = provider.lower().strip()
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported provider: {provider}")
        if provider != self.config.provider:
            self.config.provider = provider
            # Model names are provider specific
            self.config.model = None
            self.config.media_model = None
        self.save_config()

    def get_api_key(self, provider: Optional[str] = None) -> Optional[str]:
        """Get API key for a provider from config or environment"""
        provider = provider or self.config.provider
        if self.config.api_keys.get(provider):
            return self.config.api_keys[provider]
        for env_var in PROVIDER_ENV_KEYS.get(provider, ()):
            value = os.getenv(env_var)
            if value:
                return value
        return None

    def set_api_key(self, api_key: str, provider: Optional[str] = None):
        """Set and save the API key for a provider"""
        provider = provider or self.config.provider
        self.config.api_keys[provider] = api_key
        self.save_config()

    def has_api_key(self) -> bool:
        """Check if an API key is configured for the current provider"""
        return bool(self.get_api_key())

    def get_models(self) -> tuple[str, str]:
        """Get configured models (text, media), falling back to provider defaults"""
        defaults = PROVIDER_DEFAULTS[self.config.provider]
        return (
            self.config.model or defaults["model"],
            self.config.media_model or defaults["media_model"]
        )

    def get_config_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for LinguaScribeConfig"""
        provider = self.config.provider
        text_model, media_model = self.get_models()
        return {
            "provider": provider,
            "model": text_model,
            "media_model": media_model,
            "log_level": self.config.log_level,
            f"{provider}_api_key": self.get_api_key(provider),
        }

    def validate_api_key(self, api_key: str) -> bool:
        """Cheap shape check; the provider rejects bad keys on first use"""
        return bool(api_key) and len(api_key.strip()) > 10


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
