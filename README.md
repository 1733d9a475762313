# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations:

| Method | Printed as | Effect |
|--------|------------|--------|
| `push_a` / `push_b` | `pa` / `pb` | move the top of one stack onto the other |
| `swap_a` / `swap_b` | `sa` / `sb` | swap the two top elements of a stack |
| `rotate_a` / `rotate_b` | `ra` / `rb` | rotate a stack so the top goes to the bottom |
| `reverse_rotate_a` / `reverse_rotate_b` | `rra` / `rra` | rotate a stack so the bottom comes to the top |

Note that `reverse_rotate_b` is printed under the same name as
`reverse_rotate_a`.

The numbers are first replaced by their ranks (1 for the smallest), then
sorted. Each operation is printed as it is performed. While moving numbers
back from `b` into `a`, the number of rotations chosen for each insertion is
also printed on its own line. At the end both stacks are shown, top first,
with their sizes.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments or as one space-separated string:

```
pushswap 3 1 2
pushswap "5 -2 9 0"
```

Each number may carry one leading `+` or `-` and must otherwise consist of
digits only. Input that is not such a number, is outside the 32-bit signed
range, contains duplicates, or holds no numbers at all prints `error`. With
no arguments nothing is printed.

## Library use

```python
from pushswap.cli import format_state
from pushswap.parsing import parse_arguments
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks

stacks = Stacks(parse_arguments(["4", "2", "7", "1"]))
sort_stacks(stacks)
print(format_state(stacks), end="")
```

- `pushswap.parsing`: `parse_arguments` turns arguments into ranks and raises
  `ParseError` (a `ValueError`) for bad input; `parse_int`, `compress` and
  `has_duplicates` are its building blocks.
- `pushswap.stacks`: `Stacks(values, out)` holds the two stacks as deques
  (`stacks.a`, `stacks.b`, top on the left) and writes each operation to
  `out`, or to standard output when `out` is None.
- `pushswap.sorting`: `is_sorted`, `sort_three`, `insert_into_b`,
  `insert_into_a` and `sort_stacks`.
- `pushswap.cli`: `format_state` and the `main` entry point.

The package also carries small helper modules used along the way:
`pushswap.chars` (ASCII classification and case conversion),
`pushswap.strings` (searching, bounded copying, slicing, trimming),
`pushswap.convert` (`atoi`, `itoa`, `split`, `strmapi`, `striteri`),
`pushswap.memory` (byte-buffer filling, searching, comparing and copying),
`pushswap.output` (writing characters, strings and numbers to a stream) and
`pushswap.linked` (`Node` and `LinkedList`).

## What it does not do

There is no command for generating random input; supply the numbers
yourself.

## Running the tests

```
pip install ".[test]"
pytest
```