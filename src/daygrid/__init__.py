# SPDX-License-Identifier: MIT

from daygrid.cleanup import register_cleanup
from daygrid.initialize import initialize
from daygrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
