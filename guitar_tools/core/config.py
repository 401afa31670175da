"""Configuration management for Guitar Tools components."""

from dataclasses import asdict, dataclass
from typing import Dict, Any, Optional
import json
import os
from pathlib import Path

from ..logger import get_logger

logger = get_logger(__name__)

# Length of one recording in seconds
CAPTURE_DURATION = 1.0
# Margin (Hz) below the target's second harmonic where the peak search stops
HARMONIC_GUARD = 20
# Sample rate used to synthesize reference tones
REFERENCE_SAMPLE_RATE = 48000
# Reference tone volume on the 0-100 scale
DEFAULT_VOLUME = 10
# Peak must stand this many times above the median of the search window
MIN_PEAK_RATIO = 4.0


@dataclass(frozen=True)
class TunerConfig:
    """Settings handed to each stage of the tuning pipeline."""

    capture_duration: float = CAPTURE_DURATION
    harmonic_guard: int = HARMONIC_GUARD
    min_peak_ratio: float = MIN_PEAK_RATIO
    reference_sample_rate: int = REFERENCE_SAMPLE_RATE
    default_volume: int = DEFAULT_VOLUME

    def __post_init__(self):
        if self.capture_duration <= 0:
            raise ValueError(
                f"capture_duration must be positive, got {self.capture_duration}"
            )
        if self.harmonic_guard < 0:
            raise ValueError(
                f"harmonic_guard must not be negative, got {self.harmonic_guard}"
            )
        if self.reference_sample_rate <= 0:
            raise ValueError(
                f"reference_sample_rate must be positive, got {self.reference_sample_rate}"
            )


class ConfigManager:
    """Configuration manager for Guitar Tools components.

    Each section is stored as ``<config_dir>/<section>.json``. Files that do
    not exist yet are created from the defaults.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory to store configuration files, or None to use default
        """
        if config_dir is None:
            # Use ~/.config/guitar_tools by default
            home = os.path.expanduser("~")
            config_dir = os.path.join(home, ".config", "guitar_tools")

        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        defaults = asdict(TunerConfig())
        self.default_configs = {
            "tuner": {
                "capture_duration": defaults["capture_duration"],
                "harmonic_guard": defaults["harmonic_guard"],
                "min_peak_ratio": defaults["min_peak_ratio"],
            },
            "reference_tone": {
                "sample_rate": defaults["reference_sample_rate"],
                "volume": defaults["default_volume"],
            },
        }

        self.configs = {}
        for config_name, default_config in self.default_configs.items():
            self.configs[config_name] = self.load_config(config_name, default_config)

    def load_config(self, name: str, default_config: Dict[str, Any]) -> Dict[str, Any]:
        """Load configuration from file or create default.

        Args:
            name: Configuration name
            default_config: Default configuration to use if file doesn't exist

        Returns:
            Configuration dictionary
        """
        config_file = self.config_dir / f"{name}.json"

        if not config_file.exists():
            config = default_config.copy()
            self.save_config(name, config)
            return config

        try:
            with open(config_file, "r") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration from {config_file}: {e}")
            return default_config.copy()

        if not isinstance(config, dict):
            logger.error(f"Ignoring {config_file}: expected a JSON object")
            return default_config.copy()

        logger.info(f"Loaded configuration from {config_file}")

        # Ensure all default keys are present
        for key, value in default_config.items():
            config.setdefault(key, value)
        return config

    def save_config(self, name: str, config: Dict[str, Any]) -> bool:
        """Save configuration to file.

        Returns:
            True if saved successfully, False otherwise
        """
        config_file = self.config_dir / f"{name}.json"

        try:
            with open(config_file, "w") as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving configuration to {config_file}: {e}")
            return False

        logger.info(f"Saved configuration to {config_file}")
        return True

    def get_config(self, name: str) -> Dict[str, Any]:
        """Get a copy of the configuration section ``name``."""
        return self.configs.get(name, {}).copy()

    def update_config(self, name: str, updates: Dict[str, Any]) -> bool:
        """Update configuration and save to file.

        Returns:
            True if updated and saved successfully, False otherwise
        """
        if name not in self.configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name].update(updates)
        return self.save_config(name, self.configs[name])

    def reset_config(self, name: str) -> bool:
        """Reset configuration to default."""
        if name not in self.default_configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name] = self.default_configs[name].copy()
        return self.save_config(name, self.configs[name])

    def to_tuner_config(self) -> TunerConfig:
        """Build a TunerConfig from the loaded sections.

        Raises:
            ValueError: If a stored value is missing, of the wrong type or out of range
        """

        def value(section: str, key: str, convert):
            raw = self.configs[section].get(key)
            try:
                return convert(raw)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Invalid value for '{key}' in {section}.json: {raw!r}"
                ) from None

        return TunerConfig(
            capture_duration=value("tuner", "capture_duration", float),
            harmonic_guard=value("tuner", "harmonic_guard", int),
            min_peak_ratio=value("tuner", "min_peak_ratio", float),
            reference_sample_rate=value("reference_tone", "sample_rate", int),
            default_volume=value("reference_tone", "volume", int),
        )
