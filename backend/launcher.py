"""Unit Converter launcher — serves the HTTP API on a free local port."""

from __future__ import annotations

import os
import socket
import sys
import traceback

import uvicorn

from unitconv.config import settings


def _get_log_path() -> str:
    """Return a path for the crash log next to this script."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "unitconv_crash.log")


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def main() -> None:
    port = find_free_port()
    print(f"Starting {settings.app_name} on http://127.0.0.1:{port}/docs")
    print("Press Ctrl+C to stop.\n")

    uvicorn.run(
        "unitconv.main:app",
        host="127.0.0.1",
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except Exception:
        err = traceback.format_exc()
        print(err)
        try:
            with open(_get_log_path(), "w") as f:
                f.write(err)
            print(f"\nCrash log saved to: {_get_log_path()}")
        except OSError as exc:
            print(f"\nCould not write crash log: {exc}")
        sys.exit(1)
