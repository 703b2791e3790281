"""
Command line interface for neveridle.

Parses options, validates them, then hands over to the idle loop.
"""

import argparse
import enum
import sys
import time

from .config import OptionsBuilder
from .engine import IdlePreventer
from .injection import PyAutoGuiInjector
from .keys import KEY_NAMES
from .logger import Logger

DESCRIPTION = "Keyboard/mouse event sender that keeps a session from going idle."


class ExitCode(enum.IntEnum):
    SUCCESS = 0
    OPTION_PARSING_ERROR = 1
    OPTION_VALIDATION_ERROR = 2
    OTHER_ERROR = -1


# ============================================================================
# OPTION PARSING
# ============================================================================

class NeverIdleArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports syntax errors with our own exit status"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(int(ExitCode.OPTION_PARSING_ERROR), f"{self.prog}: error: {message}\n")


class KeyCodeAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        namespace.set_key_code(values)


class DelayAction(argparse.Action):
    """Store an integer delay, warning and keeping the old one on bad input"""

    def __init__(self, option_strings, dest, label=None, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self.label = label or dest

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.set_delay(self.dest, values, self.label)


def build_parser():
    parser = NeverIdleArgumentParser(
        prog="neveridle",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser._optionals.title = "Command-line options"
    parser.add_argument(
        "-k",
        "--keycode",
        dest="key_code",
        metavar="NAME",
        action=KeyCodeAction,
        help="Key code name to send (see the list below).",
    )
    parser.add_argument(
        "-d",
        "--noDefault",
        dest="send_default_move",
        action="store_false",
        help="Do not send the default mouse move event.",
    )
    parser.add_argument(
        "-1",
        "--once",
        dest="run_once",
        action="store_true",
        help="Send events once and exit immediately, rather than looping forever.",
    )
    parser.add_argument(
        "--minDelay",
        dest="min_delay",
        metavar="N",
        action=DelayAction,
        label="Minimal delay",
        help="Minimal delay in seconds between cycles.",
    )
    parser.add_argument(
        "--maxDelay",
        dest="max_delay",
        metavar="N",
        action=DelayAction,
        label="Maximal delay",
        help="Maximal delay in seconds between cycles.",
    )
    parser.add_argument(
        "-r",
        "--noRandomDelay",
        dest="use_random_delay",
        action="store_false",
        help=(
            "Delay by max delay seconds between cycles, rather than by a "
            "random amount between min and max delay."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbosity",
        action="count",
        help="Be verbose; repeat to increase verbosity.",
    )
    parser.add_argument(
        "-h",
        "--help",
        dest="help",
        action="store_true",
        help="Get help; you are reading it.",
    )
    return parser


# ============================================================================
# HELP TEXT
# ============================================================================

def format_exit_code(code: ExitCode) -> str:
    return f"0x{int(code) & 0xFFFFFFFF:08X}\t{code.name}"


def help_epilog(options) -> str:
    """Sections printed after the option table"""
    lines = ["Option values:"]
    lines.extend(f"{name}={value}" for name, value in options.option_values())
    lines.append("")
    lines.append("Exit values:")
    lines.extend(format_exit_code(code) for code in ExitCode)
    lines.append("")
    lines.append("Key code names:")
    lines.append(" ".join(KEY_NAMES))
    return "\n".join(lines)


def print_help(parser, options):
    parser.epilog = help_epilog(options)
    parser.print_help(sys.stdout)


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def main(argv=None, injector_factory=PyAutoGuiInjector, sleep=time.sleep, rng=None):
    """Run neveridle and return the process exit status"""
    logger = Logger()
    parser = build_parser()
    options = parser.parse_args(argv, namespace=OptionsBuilder(logger))

    if options.help:
        print_help(parser, options)
        return int(ExitCode.SUCCESS)

    try:
        config = options.build()
    except Exception as exc:
        logger.error(str(exc))
        return int(ExitCode.OPTION_VALIDATION_ERROR)

    logger.verbosity = config.verbosity
    try:
        preventer = IdlePreventer(config, injector_factory(), logger, sleep=sleep, rng=rng)
        preventer.run()
    except KeyboardInterrupt:
        logger.info("Stopped by user (Ctrl+C)")
    except Exception as exc:
        logger.error(str(exc) or type(exc).__name__)
        return int(ExitCode.OTHER_ERROR)
    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())
