"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

@dataclass
class UIConfig:
    """Configuration for the console presentation layer."""
    black_symbol: str = "B"
    white_symbol: str = "W"
    empty_symbol: str = "."
    hint_symbol: str = "*"  # Empty cell where the current player may move
    show_valid_moves: bool = True

@dataclass
class SimulationConfig:
    """Configuration for random playouts."""
    num_games: int = 100
    seed: int = 42
    show_progress: bool = True

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_level: str = "INFO"
    log_file: Optional[str] = None

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    ui: UIConfig = field(default_factory=UIConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            ui=UIConfig(**config_dict.get('ui', {})),
            simulation=SimulationConfig(**config_dict.get('simulation', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
