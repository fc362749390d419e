"""
Asset Digester

Handles resolving asset paths against a root directory and computing the
content digest used as a cache-busting token.
"""

import hashlib
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

_log = logging.getLogger(__name__)

# Shared digester instances, one per (root, algorithm, length) configuration
_digesters: Dict[Tuple[str, str, Optional[int]], "AssetDigester"] = {}


class AssetDigester:
    """Computes content digests for assets under a root directory."""

    def __init__(self, root, algorithm: str = "md5", length: Optional[int] = None):
        """
        Initialize the digester.

        Args:
            root: Directory that asset paths are resolved against
            algorithm: Any algorithm name accepted by hashlib (default: md5)
            length: Number of hex characters to keep, or None for the full digest

        Raises:
            ValueError: If the algorithm is unknown or length is not a positive integer
        """
        # shake_* digests are variable-length and need an explicit size
        if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake_"):
            raise ValueError(f"Unsupported digest algorithm: {algorithm!r}")
        if length is not None and (
            isinstance(length, bool) or not isinstance(length, int) or length < 1
        ):
            raise ValueError(f"Digest length must be a positive integer, got {length!r}")

        self.root = Path(root).resolve()
        self.algorithm = algorithm
        self.length = length

    def resolve(self, path: str) -> Optional[Path]:
        """
        Resolve an asset path against the root directory.

        A single leading "/" is stripped first, so "/css/main.css" and
        "css/main.css" name the same file. Containment is checked on the
        normalised path without following symlinks, so a link inside the
        root may point anywhere.

        Args:
            path: Asset path as written in the template

        Returns:
            Path of the file, or None if it does not exist or lies outside
            the root
        """
        relative = path[1:] if path.startswith("/") else path
        candidate = Path(os.path.normpath(self.root / relative))

        if candidate != self.root and self.root not in candidate.parents:
            _log.debug(f"[asset_digest] {path} resolves outside {self.root}, skipping")
            return None

        if not candidate.is_file():
            return None

        return candidate

    def digest(self, file_path: Path) -> str:
        """
        Calculate the content digest of a file.

        The file is read on every call so the digest always reflects its
        current contents.

        Args:
            file_path: Path to the file

        Returns:
            Hex digest of the file contents, truncated to length if set
        """
        hasher = hashlib.new(self.algorithm)
        with open(file_path, "rb") as f:
            hasher.update(f.read())
        hex_digest = hasher.hexdigest()
        if self.length is not None:
            hex_digest = hex_digest[: self.length]
        return hex_digest

    def bust(self, path: str) -> str:
        """
        Append a content digest to an asset path.

        Args:
            path: Asset path as written in the template

        Returns:
            "{path}?v={digest}" if the file exists, otherwise path unchanged
        """
        file_path = self.resolve(path)
        if file_path is None:
            return path

        hex_digest = self.digest(file_path)
        _log.info(f"[asset_digest] Generated: {path} => {hex_digest}")
        return f"{path}?v={hex_digest}"


def get_digester(root, algorithm: str = "md5", length: Optional[int] = None) -> AssetDigester:
    """Get or create the shared AssetDigester for a configuration.

    Args:
        root: Directory that asset paths are resolved against
        algorithm: hashlib algorithm name
        length: Digest truncation length, or None
    """
    key = (str(Path(root).resolve()), algorithm, length)
    digester = _digesters.get(key)
    if digester is None:
        digester = AssetDigester(root, algorithm, length)
        _digesters[key] = digester
    return digester
