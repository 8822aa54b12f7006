"""Pass-through property sanitisation for host elements."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Attributes and handlers the widget owns on its wrapper element
WRAPPER_DENYLIST = frozenset(
    {
        "tabIndex",
        "onFocus",
        "onBlur",
        "onMouseDown",
        "onMouseUp",
        "onMouseOver",
        "onMouseOut",
        "onTouchStart",
        "onTouchEnd",
        "disabled",
        "style",
        "className",
    }
)

# Attributes and handlers the widget owns on every day cell
DAY_DENYLIST = frozenset(
    {
        "tabIndex",
        "key",
        "ref",
        "onBlur",
        "onFocus",
        "onMouseDown",
        "onMouseUp",
        "onMouseOver",
        "onMouseOut",
        "onTouchStart",
        "onTouchEnd",
        "onKeyDown",
        "style",
        "className",
    }
)


def sanitize_props(props: dict[str, Any], denied: frozenset[str]) -> dict[str, Any]:
    """Drop host-supplied properties that would override widget-owned ones.

    Args:
        props: Pass-through properties supplied by the host
        denied: Property names the widget reserves

    Returns:
        A new dict without the reserved properties
    """
    sanitized = {name: value for name, value in (props or {}).items() if name not in denied}
    dropped = len(props or {}) - len(sanitized)
    if dropped:
        logger.debug(f"Dropped {dropped} reserved pass-through properties")
    return sanitized
