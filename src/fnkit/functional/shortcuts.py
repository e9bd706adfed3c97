"""Short aliases for frequently used functions."""

from typing import Any, Dict, MutableMapping

from fnkit.core.config import Settings
from fnkit.functional.partial import partial
from fnkit.logger.logger import logger

__all__ = ["SHORTCUTS", "define_shortcuts"]

SHORTCUTS: Dict[str, Any] = {"p": partial}


def define_shortcuts(
    namespace: MutableMapping[str, Any], settings: Settings
) -> Dict[str, Any]:
    """Add the shortcuts to ``namespace`` unless ``settings`` disables them.

    Returns:
        The shortcuts that were defined.
    """
    if settings.disable_shortcuts:
        logger.debug("Shortcuts disabled, not defining %s", sorted(SHORTCUTS))
        return {}
    namespace.update(SHORTCUTS)
    return dict(SHORTCUTS)
