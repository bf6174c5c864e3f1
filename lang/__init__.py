"""
Site Copy Module
================
Look up the page's text strings by key.
"""

import logging

from lang.en import STRINGS

logger = logging.getLogger(__name__)


def get(key: str, **kwargs) -> str:
    """
    Get a page string by key.

    Args:
        key: The string key
        **kwargs: Format arguments

    Returns:
        The string, or the key if not found
    """
    text = STRINGS.get(key)
    if text is None:
        logger.warning(f"Missing string '{key}'")
        return key

    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Missing format key {e} for string '{key}'")

    return text


# Shortcut alias
_ = get
