#!/usr/bin/env python3
"""
myshell - a minimal interactive command interpreter

This is the main entry point for myshell.

Sequence:
1. Read configuration (built-in defaults)
2. Initialize logging
3. Run the shell loop
4. Shut logging down

Author: YSNRFD
Version: 1.0.0
"""

import sys

from myshell.core.config_loader import get_config
from myshell.exceptions import AllocationError
from myshell.logger import Logger, LogLevel, get_logger
from myshell.shell.shell import create_shell


def main() -> int:
    """
    Main entry point for myshell.

    Returns:
        0 when the loop ends normally, 1 after a fatal allocation error
    """
    config = get_config()

    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
    )
    logger = get_logger('shell')

    shell = create_shell(config.shell)

    try:
        return shell.run()
    except AllocationError as e:
        logger.exception("Fatal allocation failure", exc=e)
        shell.report_error("allocation error")
        return 1
    except KeyboardInterrupt:
        shell.stdout.write("\n")
        return 130
    finally:
        Logger.shutdown()


if __name__ == "__main__":
    sys.exit(main())
