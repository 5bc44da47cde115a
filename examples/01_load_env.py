"""
Load environment files — seed configuration at startup.

Writes two small definition files to a temporary directory, loads them in
order, and shows the last-file-wins merge plus the error raised for a
malformed line.

Prerequisites: None
    pip install -e .

Run:
    python examples/01_load_env.py
"""

import logging
import os
import tempfile
from pathlib import Path

from envelope import MalformedLineError, MemoryEnvironment, load


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    with tempfile.TemporaryDirectory() as tmp:
        base = Path(tmp) / "base.env"
        base.write_text("APP_MODE=development\nAPP_PORT=8000\n")
        prod = Path(tmp) / "prod.env"
        prod.write_text("APP_MODE=production\n")

        load(base, prod)
        print(f"APP_MODE={os.environ['APP_MODE']}")
        print(f"APP_PORT={os.environ['APP_PORT']}")

        env = MemoryEnvironment()
        load(prod, base, environ=env)
        print(f"Reversed order into memory: {env.as_dict()}")

        broken = Path(tmp) / "broken.env"
        broken.write_text("GOOD=1\nno equals sign here\n")
        try:
            load(broken)
        except MalformedLineError as exc:
            print(f"Error: {exc}")


if __name__ == "__main__":
    main()
