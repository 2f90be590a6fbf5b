"""
Strategy Factory Module - Name registry for search strategies.

Strategies register themselves at import time; the CLI and the saved
settings refer to them by name only.
"""

from typing import Dict, List, Optional, Type

from .base import SolverStrategy


# Used when no name is given on the command line or in config.json
DEFAULT_STRATEGY = "bfs"

_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy under its `name`.

    Raises:
        ValueError: If another class already uses the name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name {cls.name!r} already used by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def get_default_strategy_name() -> str:
    """DEFAULT_STRATEGY if registered, else the first registered name."""
    if DEFAULT_STRATEGY in _STRATEGIES or not _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES))


def create_strategy(name: Optional[str] = None) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name; None or "" selects the default strategy

    Returns:
        New strategy instance

    Raises:
        ValueError: If no strategy has that name
    """
    name = name or get_default_strategy_name()
    try:
        return _STRATEGIES[name]()
    except KeyError:
        available = ", ".join(sorted(_STRATEGIES))
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None


def get_strategy_names() -> List[str]:
    return sorted(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of every strategy, for --help output."""
    return [
        {"name": name, "description": _STRATEGIES[name].description}
        for name in get_strategy_names()
    ]
