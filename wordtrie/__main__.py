# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .cli import SpellCLI

import sys


def main() -> None:
    SpellCLI().main(sys.argv[1:])


if __name__ == "__main__":
    main()
