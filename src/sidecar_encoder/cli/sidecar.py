"""
Transform utility: base64-encode the first argument and print it.

Usage:
    sidecar <string>

The argument is taken verbatim (no option parsing), extra arguments are
ignored and standard input is never read. Exits 1 with a usage line on
standard output when no argument is given.
"""

import base64
import os
import sys
from typing import List, Optional

USAGE = "Usage: sidecar <string>"


def encode(text: str) -> str:
    """Standard padded base64 of the bytes of `text`."""
    # fsencode restores the original bytes of undecodable argv entries
    return base64.b64encode(os.fsencode(text)).decode("ascii")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print(USAGE)
        return 1

    print(encode(args[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
