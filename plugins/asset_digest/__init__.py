"""
Asset Digest Plugin for Pelican

Registers the `asset_digest` Jinja2 filter, which appends a content hash of
the referenced file as a query string so browsers refetch assets when they
change:

    <link rel="stylesheet" href="{{ '/css/main.css' | asset_digest }}">
    -> /css/main.css?v=<md5 of content/css/main.css>

Paths that do not exist under the asset root are returned unchanged.

Settings:
    ASSET_DIGEST_ROOT: Directory assets live in (default: PATH). Relative
        values are resolved against PATH.
    ASSET_DIGEST_ALGORITHM: hashlib algorithm name (default: "md5")
    ASSET_DIGEST_LENGTH: Truncate the hex digest to this many characters
        (default: None, keep the full digest)

Usage:
    Add 'asset_digest' to PLUGINS in pelicanconf.py
"""

import logging

from pelican import signals

from .filters import asset_digest

_log = logging.getLogger(__name__)


def add_filters(generator):
    """Add the asset_digest filter to the generator's Jinja environment."""
    generator.env.filters.update({
        'asset_digest': asset_digest,
    })


def register():
    """Plugin registration - required by Pelican."""
    _log.info("[asset_digest] Registering asset digest filter")
    signals.generator_init.connect(add_filters)
