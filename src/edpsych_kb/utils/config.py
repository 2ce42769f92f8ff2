"""Configuration management for the knowledge engine."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


@dataclass
class RetrievalConfig:
    """Keyword scoring configuration."""
    default_limit: int = 5
    exact_match_weight: float = 2.0
    partial_match_weight: float = 1.0


@dataclass
class ComposerConfig:
    """Response composition configuration."""
    top_n: int = 3
    follow_up_enabled: bool = True


@dataclass
class KnowledgeConfig:
    """Which entries are loaded when the engine is initialized."""
    load_defaults: bool = True
    corpus_path: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    retrieval: RetrievalConfig = field(default_factory=RetrievalConfig)
    composer: ComposerConfig = field(default_factory=ComposerConfig)
    knowledge: KnowledgeConfig = field(default_factory=KnowledgeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file and environment variables.

    Priority: environment variables > config file > defaults

    Args:
        config_path: Optional path to YAML config file

    Returns:
        Config object with loaded settings
    """
    load_dotenv()

    config = Config()

    yaml_path = config_path or os.getenv("EDPSYCH_KB_CONFIG", "config/settings.yaml")
    if Path(yaml_path).exists():
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if "retrieval" in data:
            retrieval_data = data["retrieval"] or {}
            config.retrieval = RetrievalConfig(
                default_limit=int(retrieval_data.get("default_limit", 5)),
                exact_match_weight=float(retrieval_data.get("exact_match_weight", 2.0)),
                partial_match_weight=float(retrieval_data.get("partial_match_weight", 1.0))
            )

        if "composer" in data:
            composer_data = data["composer"] or {}
            config.composer = ComposerConfig(
                top_n=int(composer_data.get("top_n", 3)),
                follow_up_enabled=bool(composer_data.get("follow_up_enabled", True))
            )

        if "knowledge" in data:
            knowledge_data = data["knowledge"] or {}
            config.knowledge = KnowledgeConfig(
                load_defaults=bool(knowledge_data.get("load_defaults", True)),
                corpus_path=knowledge_data.get("corpus_path")
            )

        if "logging" in data:
            logging_data = data["logging"] or {}
            config.logging = LoggingConfig(
                level=logging_data.get("level", "INFO"),
                file=logging_data.get("file")
            )

    if os.getenv("EDPSYCH_KB_LOG_LEVEL"):
        config.logging.level = os.getenv("EDPSYCH_KB_LOG_LEVEL")
    if os.getenv("EDPSYCH_KB_CORPUS"):
        config.knowledge.corpus_path = os.getenv("EDPSYCH_KB_CORPUS")

    return config
