"""Configuration management."""

import json
import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body, InvalidBody
from nbody_sim.presets import get_preset

YAML_SUFFIXES = ('.yaml', '.yml')
NUMERIC_FIELDS = {'G': float, 'dt': float, 'extent': float, 'steps': int, 'render_every': int, 'debug_every': int}


@dataclass
class Config:
    """Simulation configuration."""
    # Simulation parameters
    G: float = constants.G
    dt: float = constants.DAY
    steps: int = 365
    force_method: str = "vectorized"
    backend: str = "numpy"
    
    # Initial conditions: explicit bodies override the preset
    preset: str = "sun_earth"
    preset_params: Dict[str, Any] = None
    bodies: Optional[List[Dict[str, Any]]] = None
    seed: Optional[int] = None
    
    # Rendering parameters
    render: bool = False
    render_every: int = 1
    extent: float = 4.0 * constants.AU
    
    # Progress output
    debug_every: int = 30
    
    def __post_init__(self):
        if self.preset_params is None:
            self.preset_params = {}
        # Plain lists keep the config serializable by yaml.safe_dump
        if self.bodies:
            self.bodies = [
                {key: list(value) if isinstance(value, (tuple, list)) else value
                 for key, value in entry.items()} if isinstance(entry, dict) else entry
                for entry in self.bodies
            ]


def _body_from_entry(index: int, entry: Any) -> Body:
    if not isinstance(entry, dict):
        raise InvalidBody(f"Body {index}: expected a mapping with mass and position, got {entry!r}")
    missing = [key for key in ('mass', 'position') if key not in entry]
    if missing:
        raise InvalidBody(f"Body {index}: missing {', '.join(missing)}")
    unknown = set(entry) - {'mass', 'position', 'velocity'}
    if unknown:
        raise InvalidBody(f"Body {index}: unknown keys {sorted(unknown)}")
    body = Body(
        mass=entry['mass'],
        position=entry['position'],
        velocity=entry.get('velocity', (0.0, 0.0)),
    )
    try:
        body.validate()
    except InvalidBody as exc:
        raise InvalidBody(f"Body {index}: {exc}") from exc
    return Body(
        mass=float(body.mass),
        position=tuple(float(c) for c in body.position),
        velocity=tuple(float(c) for c in body.velocity),
    )


def bodies_from_config(config: Config) -> List[Body]:
    """Build the initial body list described by a config.
    
    Args:
        config: Config object
        
    Returns:
        List of bodies, from config.bodies if given, otherwise from the preset

    Raises:
        InvalidBody: If an explicit body entry is missing fields or malformed
    """
    if config.bodies:
        return [_body_from_entry(index, entry) for index, entry in enumerate(config.bodies)]
    preset = get_preset(config.preset, G=config.G, seed=config.seed, **config.preset_params)
    return preset.generate()


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object

    Raises:
        ValueError: If the file cannot be parsed or does not describe a Config
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Could not parse {config_path}: {e}") from e
        elif config_path.suffix == '.json':
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Could not parse {config_path}: {e}") from e
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")
    
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")
    unknown = set(data) - {field.name for field in fields(Config)}
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    for key, cast in NUMERIC_FIELDS.items():
        if key in data:
            try:
                data[key] = cast(data[key])
            except (TypeError, ValueError):
                raise ValueError(f"Config '{key}' must be a number, got {data[key]!r}") from None
    if data.get('bodies') is not None and not isinstance(data['bodies'], list):
        raise ValueError("Config 'bodies' must be a list of body mappings")
    if data.get('preset_params') is not None and not isinstance(data['preset_params'], dict):
        raise ValueError("Config 'preset_params' must be a mapping")
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    if output_path.suffix not in YAML_SUFFIXES and output_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
    
    with open(output_path, 'w') as f:
        if output_path.suffix in YAML_SUFFIXES:
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
