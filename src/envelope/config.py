"""
Configuration options for the loader.
"""

from dataclasses import dataclass

DEFAULT_ENV_PATH = ".env"


@dataclass
class LoaderConfig:
    """
    Options controlling how definition files are located and read.

    Attributes:
        default_path: File loaded when ``load()`` is called without paths.
            Relative paths resolve against the current working directory. Default: ".env".
        encoding: Text encoding used to read every file. Default: "utf-8".
    """

    default_path: str = DEFAULT_ENV_PATH
    encoding: str = "utf-8"
