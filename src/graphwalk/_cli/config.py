"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from pydantic import ValidationError

from graphwalk._mode import GraphMode


class ConfigError(Exception):
    """Error in graphwalk configuration."""


class Strategy(StrEnum):
    """Traversal strategies available from the command line."""

    BFS = "bfs"
    DFS = "dfs"
    CLOSEST = "closest"
    RANDOM = "random"


_MODE_KEYS = frozenset(GraphMode.model_fields)


@dataclass(slots=True, frozen=True)
class GraphwalkConfig:
    """Configuration loaded from the [tool.graphwalk] table of pyproject.toml.

    Command-line flags take precedence over every value here.
    """

    mode: GraphMode = field(default_factory=GraphMode)
    strategy: Strategy = Strategy.BFS
    max_steps: int | None = None
    seed: int | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_mode(section: dict[str, object]) -> GraphMode:
    flags = {key: value for key, value in section.items() if key in _MODE_KEYS}
    for key, value in flags.items():
        if not isinstance(value, bool):
            msg = f"Invalid [tool.graphwalk].{key}: expected boolean"
            raise ConfigError(msg)
    try:
        return GraphMode(**flags)
    except ValidationError as e:
        msg = f"Invalid graph mode in [tool.graphwalk]: {e.errors()[0]['msg']}"
        raise ConfigError(msg) from e


def _parse_strategy(value: object) -> Strategy:
    if not isinstance(value, str):
        msg = "Invalid [tool.graphwalk].strategy: expected string"
        raise ConfigError(msg)
    try:
        return Strategy(value)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        msg = f"Invalid [tool.graphwalk].strategy '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from None


def _parse_optional_int(section: dict[str, object], key: str, *, minimum: int | None = None) -> int | None:
    if key not in section:
        return None
    value = section[key]
    # bool is a subclass of int
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"Invalid [tool.graphwalk].{key}: expected integer"
        raise ConfigError(msg)
    if minimum is not None and value < minimum:
        msg = f"Invalid [tool.graphwalk].{key}: must be at least {minimum}"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> GraphwalkConfig:
    """Load and validate [tool.graphwalk] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphwalkConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    if not isinstance(tool_section, dict):
        msg = "Invalid [tool]: expected a table"
        raise ConfigError(msg)
    section = tool_section.get("graphwalk", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.graphwalk]: expected a table"
        raise ConfigError(msg)

    if not section:
        # No [tool.graphwalk] section - return default config
        return GraphwalkConfig(project_root=project_root)

    unknown = set(section) - _MODE_KEYS - {"strategy", "max_steps", "seed"}
    if unknown:
        msg = f"Unknown keys in [tool.graphwalk]: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    strategy = _parse_strategy(section["strategy"]) if "strategy" in section else Strategy.BFS

    return GraphwalkConfig(
        mode=_parse_mode(section),
        strategy=strategy,
        max_steps=_parse_optional_int(section, "max_steps", minimum=1),
        seed=_parse_optional_int(section, "seed"),
        project_root=project_root,
    )


def get_config() -> GraphwalkConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphwalkConfig (defaults if no pyproject.toml or no [tool.graphwalk] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphwalkConfig()
    return load_config(pyproject_path)
