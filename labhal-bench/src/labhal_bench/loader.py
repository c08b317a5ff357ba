"""Driver factory lookup for bench files.

Bench files name their drivers as ``"module:attribute"`` strings so that
only the vendor packages a bench actually uses are imported. The attribute
part may be dotted to reach a factory on a class.

Example:
    factory = load_driver("labhal_rigol.dp800:create_instrument")
    psu = factory(visa_address="TCPIP::192.168.1.50::5555::SOCKET")
"""

from __future__ import annotations

import importlib
from typing import Any, Callable


def split_driver_path(driver_path: str) -> tuple[str, str]:
    """Split ``"module:attribute"`` into its two parts.

    Raises:
        ValueError: If the colon or either part is missing.
    """
    module_path, sep, attr_path = driver_path.strip().partition(":")
    if not sep:
        raise ValueError(
            f"Invalid driver path '{driver_path}': must be in 'module:function' format"
        )
    if not module_path or not attr_path:
        raise ValueError(f"Invalid driver path '{driver_path}': module and function names required")
    return module_path, attr_path


def load_driver(driver_path: str) -> Callable[..., Any]:
    """Import the module of *driver_path* and return its factory.

    Args:
        driver_path: Path such as ``"labhal_siglent.sdg:create_instrument"``.

    Returns:
        The factory callable.

    Raises:
        ValueError: If the driver path format is invalid.
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute doesn't exist in the module.
        TypeError: If the attribute is not callable.
    """
    module_path, attr_path = split_driver_path(driver_path)

    try:
        target: Any = importlib.import_module(module_path)
    except ImportError as exc:
        raise ImportError(f"Failed to import module '{module_path}': {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise AttributeError(
                f"Module '{module_path}' has no attribute '{attr_path}'"
            ) from None

    if not callable(target):
        raise TypeError(f"'{driver_path}' is not callable")
    return target
