"""Configuration model for music catalog."""

from pathlib import Path
import json
from dataclasses import asdict, dataclass, field, fields, is_dataclass

from ..exceptions import ConfigurationError


@dataclass
class StoreConfig:
    """Configuration for the catalog store."""
    thread_safe: bool = False


@dataclass
class EventConfig:
    """Configuration for domain event recording."""
    record_events: bool = True
    max_events_in_memory: int = 1000


@dataclass
class Config:
    """Main configuration model."""
    store: StoreConfig = field(default_factory=StoreConfig)
    events: EventConfig = field(default_factory=EventConfig)

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()


def _dataclass_to_dict(obj):
    """Convert dataclass to dict recursively."""
    if is_dataclass(obj):
        result = {}
        for key, value in asdict(obj).items():
            result[key] = _dataclass_to_dict(value)
        return result
    elif isinstance(obj, Path):
        return str(obj)
    elif isinstance(obj, dict):
        return {key: _dataclass_to_dict(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_dataclass_to_dict(item) for item in obj]
    else:
        return obj


def _dict_to_dataclass(data, dataclass_type):
    """Convert dict to dataclass recursively, ignoring unknown keys."""
    if not is_dataclass(dataclass_type):
        return data
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected an object for {dataclass_type.__name__}, got {type(data).__name__}"
        )

    kwargs = {}
    for f in fields(dataclass_type):
        if f.name not in data:
            continue
        nested_type = _NESTED_SECTIONS.get(f.name) if dataclass_type is Config else None
        if nested_type is not None:
            kwargs[f.name] = _dict_to_dataclass(data[f.name], nested_type)
        else:
            kwargs[f.name] = data[f.name]

    return dataclass_type(**kwargs)


_NESTED_SECTIONS = {
    "store": StoreConfig,
    "events": EventConfig,
}


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {config_path}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Configuration file {config_path} is not valid UTF-8: {e}") from e

    return _dict_to_dataclass(config_data, Config)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = _dataclass_to_dict(config)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config_dict, f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config.default(), config_path)
