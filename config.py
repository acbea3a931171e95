# ========================= config.py =========================
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ConvertConfig:
    layout: str = "wide"            # or "narrow"
    density_precision: int = 4


@dataclass
class ManifestConfig:
    root: Optional[str] = None      # defaults to the manifest's folder
    performance_column: str = "midi_performance"
    score_column: str = "midi_score"


@dataclass
class LogConfig:
    level: str = "INFO"
    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3


@dataclass
class AppConfig:
    convert: ConvertConfig = field(default_factory=ConvertConfig)
    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    log: LogConfig = field(default_factory=LogConfig)
