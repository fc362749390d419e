"""Custom Jinja2 filter for appending content digests to asset paths."""

import logging
from pathlib import Path

from jinja2 import pass_context

from .digest import get_digester

_log = logging.getLogger(__name__)


def _asset_root(context):
    """
    Work out the directory asset paths resolve against.

    ASSET_DIGEST_ROOT takes precedence; a relative value is taken to be
    relative to PATH. Otherwise PATH (Pelican's content directory) is used.

    Args:
        context: Jinja2 template context holding Pelican settings

    Returns:
        Path to the asset root, or None if neither setting is available
    """
    content_path = context.get("PATH")
    root = context.get("ASSET_DIGEST_ROOT")

    if root:
        root = Path(root)
        if not root.is_absolute() and content_path:
            root = Path(content_path) / root
        return root

    if content_path:
        return Path(content_path)

    return None


@pass_context
def asset_digest(context, path):
    """
    Append a content hash of the referenced file as a cache-busting token.

    Args:
        context: Jinja2 template context (supplied by Jinja2)
        path: Asset path, optionally starting with "/"

    Returns:
        "{path}?v={digest}" if the file exists under the asset root,
        otherwise path unchanged

    Example:
        {{ "/css/main.css" | asset_digest }}
        Output: /css/main.css?v=3f5b2c0e9d1a47b6a1c0d2e4f6a8b0c2
    """
    if not path:
        return path
    path = str(path)

    root = _asset_root(context)
    if root is None:
        _log.warning(f"[asset_digest] No PATH or ASSET_DIGEST_ROOT in context, leaving {path} as is")
        return path

    digester = get_digester(
        root,
        algorithm=context.get("ASSET_DIGEST_ALGORITHM") or "md5",
        length=context.get("ASSET_DIGEST_LENGTH"),
    )
    return digester.bust(path)
