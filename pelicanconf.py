import logging

AUTHOR = "Site Author"
SITENAME = "Asset Digest Demo"
SITEURL = ""

PATH = "content"

TIMEZONE = "UTC"

DEFAULT_LANG = "en"


def setup_logging(
    log_file_name: str | None = None,
    file_level: int | None = None,
    console_level: int | None = None,
    log_format: str | None = None,
):
    """
    Configure the root logger for a Pelican build.

    Args:
        log_file_name (str, optional): Log file to write to as well as the console
        file_level (int, optional): File logging level. Defaults to logging.INFO.
        console_level (int, optional): Console logging level. Defaults to logging.INFO.
        log_format (str, optional): Custom log format. If None, uses a default format.

    Returns:
        logging.Logger: Configured root logger
    """

    logging.addLevelName(logging.DEBUG, "🔍")
    logging.addLevelName(logging.INFO, "🆗")
    logging.addLevelName(logging.WARNING, "⚠️ ")
    logging.addLevelName(logging.ERROR, "❌")
    logging.addLevelName(logging.CRITICAL, "🔥")

    if log_format is None:
        log_format = "%(asctime)s.%(msecs)03d %(levelname)s | %(message)s (%(filename)s:%(lineno)d:%(name)s)"
    formatter = logging.Formatter(log_format, datefmt="%H:%M:%S")

    if file_level is None:
        file_level = logging.INFO
    if console_level is None:
        console_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers do the filtering
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file_name:
        file_handler = logging.FileHandler(log_file_name)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


setup_logging(console_level=logging.INFO)

# Feed generation is usually not desired when developing
FEED_ALL_ATOM = None
CATEGORY_FEED_ATOM = None
TRANSLATION_FEED_ATOM = None
AUTHOR_FEED_ATOM = None
AUTHOR_FEED_RSS = None

DEFAULT_PAGINATION = 10

# Static paths - directories to copy to output
STATIC_PATHS = ["css", "js", "images"]

# Plugins
PLUGIN_PATHS = ["plugins"]
PLUGINS = [
    "asset_digest",
]

# Asset digests
# Directory asset paths are resolved against; None means PATH.
# Relative values are resolved against PATH.
ASSET_DIGEST_ROOT = None
# Any hashlib algorithm name
ASSET_DIGEST_ALGORITHM = "md5"
# Truncate the hex digest, e.g. 8; None keeps the full digest
ASSET_DIGEST_LENGTH = None
