"""bigi-check entry point."""

from __future__ import annotations

import sys

from .convert import bigi_from_integer
from .radix import DEBUG_WIDTH, Radix
from .selfcheck import CheckResult, run_all

USAGE: str = """\
bigi-check [OPTIONS] [N ...]

Options:
  --width W     Limb width in bits (default: 5)
  --span K      Check operands of up to K limbs, plus one past each end
                (default: 1)
  --show        Print the limbs of each integer N instead of checking
  --help        Show this help message
"""


class UsageError(Exception):
    """Bad command-line arguments."""


def parse_args(args: list[str]) -> tuple[int, int, bool, list[int]]:
    """Parse command-line arguments. Returns (width, span, show, numbers)."""
    width = DEBUG_WIDTH
    span = 1
    show = False
    numbers: list[int] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--width" or arg == "--span":
            if i + 1 >= len(args):
                raise UsageError(arg + " requires an argument")
            try:
                value = int(args[i + 1])
            except ValueError:
                raise UsageError(arg + " expects an integer, got '" + args[i + 1] + "'") from None
            if arg == "--width":
                width = value
            else:
                span = value
            i += 2
        elif arg == "--show":
            show = True
            i += 1
        elif arg.startswith("-") and not _is_integer(arg):
            raise UsageError("unknown flag '" + arg + "'")
        else:
            if not _is_integer(arg):
                raise UsageError("unexpected argument '" + arg + "'")
            numbers.append(int(arg))
            i += 1
    if span < 1:
        raise UsageError("--span must be at least 1")
    if len(numbers) > 0 and not show:
        raise UsageError("integers are only accepted with --show")
    return (width, span, show, numbers)


def _is_integer(s: str) -> bool:
    try:
        int(s)
    except ValueError:
        return False
    return True


def show_limbs(radix: Radix, numbers: list[int]) -> None:
    for n in numbers:
        print(str(n) + " -> " + str(list(bigi_from_integer(n, radix).limbs)))


def report(results: list[CheckResult]) -> int:
    """Print one line per check. Returns the number of failing checks."""
    failing = 0
    for result in results:
        if result.ok:
            print(f"ok    {result.name:<10} {result.tested} cases")
        else:
            failing += 1
            print(f"FAIL  {result.name:<10} {result.failures}/{result.tested} cases")
            print("error: " + result.first_failure, file=sys.stderr)
    return failing


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    if "--help" in args or "-h" in args:
        print(USAGE, end="")
        return 0
    try:
        width, span, show, numbers = parse_args(args)
        radix = Radix(width)
    except (UsageError, ValueError) as e:
        print("error: " + str(e), file=sys.stderr)
        return 2
    if show:
        show_limbs(radix, numbers)
        return 0
    if report(run_all(radix, span)) > 0:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
