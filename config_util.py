import yaml

from maze_grid import MazeConfigError

DEFAULT_CONFIG: dict = {
    "rows": 10,
    "columns": 14,
    "width": 840,
    "height": 600,
    "wall_thickness": 5.0,
    "goal_fraction": 0.7,
    "velocity_step": 5.0,
    "win_gravity": 1.0,
    "fps": 60,
    "substeps": 4,
    "seed": None,
}

_INT_KEYS = ("rows", "columns", "width", "height", "fps", "substeps")
_POSITIVE_KEYS = _INT_KEYS + ("wall_thickness", "goal_fraction", "velocity_step", "win_gravity")


def load_config(path: str) -> dict:
    """Read a YAML file and return it as a dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if data is not None else {}


def validate_config(config: dict) -> dict:
    """Check keys and value ranges; return ``config`` unchanged."""
    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        raise MazeConfigError(f"unknown config keys: {', '.join(unknown)}")
    for key in _POSITIVE_KEYS:
        value = config[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MazeConfigError(f"{key} must be a number (got {value!r})")
        if key in _INT_KEYS and not isinstance(value, int):
            raise MazeConfigError(f"{key} must be an integer (got {value!r})")
        if value <= 0:
            raise MazeConfigError(f"{key} must be positive (got {value!r})")
    if config["goal_fraction"] > 1:
        raise MazeConfigError("goal_fraction must not exceed 1")
    seed = config["seed"]
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise MazeConfigError(f"seed must be an integer or null (got {seed!r})")
    if seed is not None and seed < 0:
        raise MazeConfigError(f"seed must not be negative (got {seed!r})")
    return config


def load_game_config(path: str | None = None, **overrides) -> dict:
    """Merge the YAML file at ``path`` and ``overrides`` over the defaults.

    ``None`` overrides are ignored so argparse defaults can be passed through.
    """
    config = dict(DEFAULT_CONFIG)
    if path is not None:
        try:
            data = load_config(path)
        except yaml.YAMLError as e:
            raise MazeConfigError(f"{path}: {e}")
        if not isinstance(data, dict):
            raise MazeConfigError(f"{path}: top level must be a mapping")
        config.update(data)
    config.update({k: v for k, v in overrides.items() if v is not None})
    return validate_config(config)
