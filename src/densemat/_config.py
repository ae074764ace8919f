"""
densemat Config - Behaviour Configuration System

Provides property-based configuration for indexing, multiplication and
rendering. Allows fine-grained control over matrix behaviour without
modifying method signatures.

Example:
    # Global configuration
    densemat.config.render = RenderConfig(align=Align.LEFT)

    # Local configuration (context manager)
    with densemat.config.local(multiply=MultiplyConfig(MultiplyGuard.EQUAL_SHAPE)):
        result = a.matrix_multiply(b)
    # Back to global config
"""

from __future__ import annotations

import logging
import threading
import warnings
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List

logger = logging.getLogger("densemat.config")


# =============================================================================
# Strategy Enumerations
# =============================================================================

class IndexingMode(IntEnum):
    """
    How ``get``/``set``/``apply`` decide whether a cell exists.
    """
    STRICT = 0         # Check row < rows and col < cols before computing an offset
    FLAT = 1           # Only check offset < len(buffer); may alias into another row


class MultiplyGuard(IntEnum):
    """
    Shape guard used by ``matrix_multiply``.
    """
    STANDARD = 0       # self.cols == other.rows, result is self.rows x other.cols
    EQUAL_SHAPE = 1    # Both operands must share the same shape


class Align(IntEnum):
    """
    Alignment of rendered values inside the common column width.
    """
    RIGHT = 0
    LEFT = 1


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass
class IndexingConfig:
    """Configuration for element lookup."""
    mode: IndexingMode = IndexingMode.STRICT


@dataclass
class MultiplyConfig:
    """Configuration for matrix multiplication."""
    guard: MultiplyGuard = MultiplyGuard.STANDARD


@dataclass
class RenderConfig:
    """Configuration for the text renderer."""
    align: Align = Align.RIGHT
    open: str = "["
    close: str = "]"


# =============================================================================
# Global Configuration Manager
# =============================================================================

class MatrixConfig:
    """
    Global configuration manager for densemat.

    Provides thread-local configuration with context manager support.
    Configuration can be set globally or locally within a context.
    """

    _SECTIONS = ("indexing", "multiply", "render")

    def __init__(self):
        self._global_indexing = IndexingConfig()
        self._global_multiply = MultiplyConfig()
        self._global_render = RenderConfig()

        # Thread-local storage for context overrides
        self._local = threading.local()

        # Callbacks for config changes
        self._callbacks: Dict[str, List[Callable]] = {
            name: [] for name in self._SECTIONS
        }

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    @property
    def indexing(self) -> IndexingConfig:
        """Get indexing configuration."""
        if getattr(self._local, "indexing", None) is not None:
            return self._local.indexing
        return self._global_indexing

    @indexing.setter
    def indexing(self, value: IndexingConfig):
        """Set global indexing configuration."""
        _warn_legacy(value)
        self._global_indexing = value
        self._notify("indexing", value)

    @property
    def multiply(self) -> MultiplyConfig:
        """Get multiply configuration."""
        if getattr(self._local, "multiply", None) is not None:
            return self._local.multiply
        return self._global_multiply

    @multiply.setter
    def multiply(self, value: MultiplyConfig):
        """Set global multiply configuration."""
        _warn_legacy(value)
        self._global_multiply = value
        self._notify("multiply", value)

    @property
    def render(self) -> RenderConfig:
        """Get render configuration."""
        if getattr(self._local, "render", None) is not None:
            return self._local.render
        return self._global_render

    @render.setter
    def render(self, value: RenderConfig):
        """Set global render configuration."""
        self._global_render = value
        self._notify("render", value)

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def strict(self) -> bool:
        """Whether strict (per-axis) bounds checking is active."""
        return self.indexing.mode == IndexingMode.STRICT

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (indexing, multiply, render)

        Returns:
            Context manager

        Raises:
            TypeError: If an unknown section name is given
        """
        unknown = set(kwargs) - set(self._SECTIONS)
        if unknown:
            raise TypeError(f"Unknown config section(s): {', '.join(sorted(unknown))}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs) -> Dict[str, Any]:
        """Set thread-local configuration, returning the overrides it replaced."""
        previous = {}
        for key, value in kwargs.items():
            if value is not None:
                _warn_legacy(value)
                previous[key] = getattr(self._local, key, None)
                setattr(self._local, key, value)
        return previous

    def _restore_local(self, previous: Dict[str, Any]):
        """Put back thread-local overrides saved by ``_set_local``."""
        for key, value in previous.items():
            setattr(self._local, key, value)

    def _clear_local(self, keys: List[str]):
        """Clear thread-local configuration."""
        for key in keys:
            if hasattr(self._local, key):
                setattr(self._local, key, None)

    # -------------------------------------------------------------------------
    # Callback Registration
    # -------------------------------------------------------------------------

    def on_change(self, config_name: str, callback: Callable):
        """
        Register callback for configuration changes.

        Args:
            config_name: Name of config ("indexing", "multiply", "render")
            callback: Function to call with the new value
        """
        if config_name not in self._callbacks:
            raise KeyError(f"Unknown config section: {config_name}")
        self._callbacks[config_name].append(callback)

    def _notify(self, config_name: str, value: Any):
        """Notify callbacks of configuration change."""
        logger.debug("config %s changed to %r", config_name, value)
        for callback in self._callbacks.get(config_name, []):
            callback(value)

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_indexing = IndexingConfig()
        self._global_multiply = MultiplyConfig()
        self._global_render = RenderConfig()
        self._clear_local(list(self._SECTIONS))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "indexing": {
                "mode": self.indexing.mode.name,
            },
            "multiply": {
                "guard": self.multiply.guard.name,
            },
            "render": {
                "align": self.render.align.name,
                "open": self.render.open,
                "close": self.render.close,
            },
        }

    def __repr__(self) -> str:
        return f"MatrixConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: MatrixConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._previous: Dict[str, Any] = {}

    def __enter__(self):
        self._previous = self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._restore_local(self._previous)
        return False


def _warn_legacy(value: Any) -> None:
    if isinstance(value, IndexingConfig) and value.mode == IndexingMode.FLAT:
        warnings.warn(
            "IndexingMode.FLAT only checks the buffer length; an out-of-range row "
            "can read or write a cell of another row.",
            stacklevel=3,
        )
    elif isinstance(value, MultiplyConfig) and value.guard == MultiplyGuard.EQUAL_SHAPE:
        warnings.warn(
            "MultiplyGuard.EQUAL_SHAPE rejects compatible non-square operands; "
            "use MultiplyGuard.STANDARD for the linear-algebra product.",
            stacklevel=3,
        )


# =============================================================================
# Global Instance
# =============================================================================

config = MatrixConfig()


# =============================================================================
# Convenience Functions
# =============================================================================

def get_config() -> MatrixConfig:
    """Get the global configuration instance."""
    return config


def set_indexing(mode: IndexingMode = IndexingMode.STRICT):
    """Select the global indexing mode."""
    config.indexing = IndexingConfig(mode=mode)


def set_multiply_guard(guard: MultiplyGuard = MultiplyGuard.STANDARD):
    """Select the global multiplication shape guard."""
    config.multiply = MultiplyConfig(guard=guard)


__all__ = [
    "IndexingMode",
    "MultiplyGuard",
    "Align",
    "IndexingConfig",
    "MultiplyConfig",
    "RenderConfig",
    "MatrixConfig",
    "config",
    "get_config",
    "set_indexing",
    "set_multiply_guard",
]
