"""
Configuration for dictanote.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from dictanote.models.note import Language


class LLMConfig(BaseModel):
    """Completion service configuration."""

    provider: str = "openai"  # openai, ollama
    model: str = "gpt-4o-mini"
    base_url: str | None = None
    api_key: str | None = None
    temperature: float = 0.3
    max_tokens: int = 4000
    timeout: float = 120.0


class StorageConfig(BaseModel):
    """Key-value storage configuration."""

    backend: str = "sqlite"  # sqlite, memory
    db_path: str = "data/dictanote.db"
    storage_key: str = "voice-dictation-storage"
    quota_bytes: int | None = None


class SpecConfig(BaseModel):
    """Specification document lookup."""

    specs_dir: str = "specs"
    file_name: str = "spec.md"


class AnalysisConfig(BaseModel):
    """Analysis workflow limits."""

    max_words: int = 2000
    prompt_version: int = 1


class ImportConfig(BaseModel):
    """Pasted and uploaded text limits."""

    min_chars: int = 10
    max_file_bytes: int = 1024 * 1024
    allowed_extensions: list[str] = Field(default_factory=lambda: [".txt", ".md"])


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    specs: SpecConfig = Field(default_factory=SpecConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    imports: ImportConfig = Field(default_factory=ImportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    default_language: Language = Language.EN_US

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            DICTANOTE_LLM_PROVIDER: Completion provider (openai, ollama)
            DICTANOTE_LLM_MODEL: Model name
            DICTANOTE_LLM_BASE_URL: Provider base URL
            DICTANOTE_LLM_API_KEY: API key (falls back to OPENAI_API_KEY)
            DICTANOTE_STORAGE_BACKEND: Key-value backend (sqlite, memory)
            DICTANOTE_STORAGE_DB_PATH: SQLite database path
            DICTANOTE_STORAGE_KEY: Record key for persisted notes
            DICTANOTE_SPECS_DIR: Directory holding <name>/spec.md documents
            DICTANOTE_ANALYSIS_MAX_WORDS: Word limit for analyzed notes
            DICTANOTE_DEFAULT_LANGUAGE: Capture language (en-US, vi-VN)
            DICTANOTE_LOG_LEVEL: Log level
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            llm=LLMConfig(
                provider=get_env("DICTANOTE_LLM_PROVIDER", "openai"),
                model=get_env("DICTANOTE_LLM_MODEL", "gpt-4o-mini"),
                base_url=get_env("DICTANOTE_LLM_BASE_URL"),
                api_key=get_env("DICTANOTE_LLM_API_KEY", os.getenv("OPENAI_API_KEY") or None),
                temperature=get_env("DICTANOTE_LLM_TEMPERATURE", 0.3),
                max_tokens=get_env("DICTANOTE_LLM_MAX_TOKENS", 4000),
                timeout=get_env("DICTANOTE_LLM_TIMEOUT", 120.0),
            ),
            storage=StorageConfig(
                backend=get_env("DICTANOTE_STORAGE_BACKEND", "sqlite"),
                db_path=get_env("DICTANOTE_STORAGE_DB_PATH", "data/dictanote.db"),
                storage_key=get_env("DICTANOTE_STORAGE_KEY", "voice-dictation-storage"),
                quota_bytes=get_env("DICTANOTE_STORAGE_QUOTA_BYTES"),
            ),
            specs=SpecConfig(
                specs_dir=get_env("DICTANOTE_SPECS_DIR", "specs"),
            ),
            analysis=AnalysisConfig(
                max_words=get_env("DICTANOTE_ANALYSIS_MAX_WORDS", 2000),
            ),
            logging=LoggingConfig(
                level=get_env("DICTANOTE_LOG_LEVEL", "INFO"),
                log_to_file=get_env("DICTANOTE_LOG_TO_FILE", False),
                log_dir=get_env("DICTANOTE_LOG_DIR", "logs"),
                file_rotation=get_env("DICTANOTE_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("DICTANOTE_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("DICTANOTE_LOG_COMPRESSION", "zip"),
                serialize=get_env("DICTANOTE_LOG_SERIALIZE", True),
            ),
            default_language=get_env("DICTANOTE_DEFAULT_LANGUAGE", Language.EN_US.value),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Apply env overrides (non-default sections only)
        default = cls()
        for section in ("llm", "storage", "specs", "analysis", "logging"):
            env_section = getattr(env_config, section)
            if env_section != getattr(default, section):
                final_dict[section] = env_section.model_dump()

        if env_config.default_language != default.default_language:
            final_dict["default_language"] = env_config.default_language.value

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
