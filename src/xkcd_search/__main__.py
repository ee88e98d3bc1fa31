"""Run the CLI with `python -m xkcd_search`."""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8):
# comic titles and transcripts are not ASCII-only.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from xkcd_search.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
