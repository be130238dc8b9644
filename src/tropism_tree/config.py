"""Global configuration for tropism-tree.

This module provides a package-wide configuration surface for logging and for
the random source used during tree growth. It exposes a dynamic `rng` proxy
that always reflects the currently configured generator, environment helpers,
and a context manager to temporarily run with a different seed.
"""

from __future__ import annotations

import contextlib
import logging
import os
from typing import Any, ContextManager, Iterator, Optional

import numpy as np
from scipy.spatial.distance import cdist as _scipy_cdist


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
_PACKAGE_LOGGER = logging.getLogger("tropism_tree")
_LOGGER = logging.getLogger(__name__)


def _parse_log_level(val: str | int | None, default: int = logging.WARNING) -> int:
    """Parse a logging level string or int into a `logging` level constant.

    Args:
        val: The desired level (e.g., "DEBUG", 10). May be None.
        default: Fallback level if `val` cannot be parsed.

    Returns:
        An integer logging level (e.g., logging.DEBUG).
    """
    if val is None:
        return default
    if isinstance(val, int):
        return val
    lvl = getattr(logging, str(val).upper(), None)
    if isinstance(lvl, int):
        return lvl
    return default


def set_log_level(level: str | int = "WARNING") -> None:
    """Set the package logger level programmatically.

    Args:
        level: A standard logging level name or integer.
    """
    _PACKAGE_LOGGER.setLevel(_parse_log_level(level))


# Default level can be overridden by env.
set_log_level(os.getenv("TROPISM_TREE_LOGLEVEL", "WARNING"))


# -----------------------------------------------------------------------------
# Env helpers
# -----------------------------------------------------------------------------
def int_env(varname: str, default: int) -> int:
    """Read an environment variable and interpret it as an integer.

    Args:
        varname: The name of the environment variable.
        default: The default value if the variable is unset.

    Returns:
        The integer value parsed from the environment.
    """
    return int(os.getenv(varname, str(default)))


def _make_rng(seed: int) -> np.random.Generator:
    """Create a NumPy PCG64 generator seeded with `seed`."""
    gen = np.random.Generator(np.random.PCG64(seed))
    _LOGGER.debug("Created NumPy PCG64 generator with seed=%d", seed)
    return gen


# -----------------------------------------------------------------------------
# Config singleton + dynamic proxy
# -----------------------------------------------------------------------------
class Config:
    """Global configuration for the tropism-tree random source.

    Holds the process-wide default generator. Growth runs never draw from it
    directly; they spawn their own generator from it so a run threads one
    explicit source through every branch.
    """

    def __init__(self) -> None:
        """Initialize config using environment defaults."""
        self._seed_default = int_env("TROPISM_TREE_SEED", 1234)
        self._rng: np.random.Generator = _make_rng(self._seed_default)
        _LOGGER.info("Config initialized: seed=%d", self._seed_default)

    def configure(self, *, seed: Optional[int] = None) -> Config:
        """Reset the default generator.

        Args:
            seed: Optional seed (defaults to the environment default).

        Returns:
            The `Config` instance (for chaining).
        """
        seed_value = self._seed_default if seed is None else int(seed)
        _LOGGER.info("Reconfiguring: seed=%d", seed_value)
        self._rng = _make_rng(seed_value)
        return self

    @contextlib.contextmanager
    def use(self, *, seed: Optional[int] = None) -> Iterator[None]:
        """Temporarily switch to a freshly seeded generator.

        Args:
            seed: Optional seed for the temporary generator.

        Yields:
            None. Restores the previous generator on exit.
        """
        prev = self._rng
        try:
            self.configure(seed=seed)
            yield
        finally:
            self._rng = prev
            _LOGGER.info("Restored previous generator")

    def seed(self, s: int = 1234) -> None:
        """Reseed the default generator deterministically.

        Args:
            s: The seed value.
        """
        _LOGGER.info("Reseeding RNG to %d", s)
        self._rng = _make_rng(s)

    def spawn_rng(self) -> np.random.Generator:
        """Return an independent generator derived from the default one."""
        return self._rng.spawn(1)[0]

    @property
    def rng(self) -> np.random.Generator:
        """Return the active default generator."""
        return self._rng


class _RNGProxy:
    """Proxy for `rng` that forwards attribute access to the current generator."""

    def __init__(self, _cfg: Config) -> None:
        self._cfg = _cfg

    def __getattr__(self, name: str) -> Any:  # noqa: D401
        return getattr(self._cfg.rng, name)


# Singleton & forwards
config = Config()
rng = _RNGProxy(config)


def cdist(*args: Any, **kwargs: Any) -> Any:
    """Compute pairwise Euclidean distances (SciPy)."""
    return _scipy_cdist(*args, **kwargs)


def configure(*, seed: Optional[int] = None) -> Config:
    """Reset the default generator (module-level)."""
    return config.configure(seed=seed)


def use(*, seed: Optional[int] = None) -> ContextManager[None]:
    """Temporarily switch generator within a context manager (module-level)."""
    return config.use(seed=seed)


def seed(s: int = 1234) -> None:
    """Reseed the default generator deterministically (module-level)."""
    config.seed(s)


def spawn_rng() -> np.random.Generator:
    """Return an independent generator derived from the default (module-level)."""
    return config.spawn_rng()
