"""Command-line entry point: parse the numbers, sort them and show both stacks."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ParseError, parse_arguments
from .sorting import sort_stacks
from .stacks import Stacks

_RULE = "----------"


def format_state(stacks: Stacks) -> str:
    """Describe both stacks, top first, with their sizes."""
    lines = [_RULE, "--list_a--", f"a_qty = {len(stacks.a)}"]
    lines.extend(str(value) for value in stacks.a)
    lines.append("--list_b--")
    lines.append(f"b_qty = {len(stacks.b)}")
    lines.extend(str(value) for value in stacks.b)
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers given as arguments, printing every operation and the final state."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        ranks = parse_arguments(args)
    except ParseError:
        sys.stdout.write("error\n")
        return 0
    stacks = Stacks(ranks)
    sort_stacks(stacks)
    sys.stdout.write(format_state(stacks))
    return 0


if __name__ == "__main__":
    sys.exit(main())