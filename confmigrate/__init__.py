"""confmigrate - versioned JSON configuration loading with schema migrations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("confmigrate")
except PackageNotFoundError:
    __version__ = "0.0.0+local"
__app_name__ = "confmigrate"
