# pushswap

A solver for the push_swap puzzle. You get two stacks, `a` and `b`. Stack `a`
starts with a list of distinct integers and stack `b` starts empty. The goal is
to leave `a` sorted in ascending order, smallest on top. You may only use these
operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top element of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

The solver prints the operations it uses, one per line. Lists of up to five
numbers get hand-tuned sequences. Longer lists get a binary radix sort on each
number's rank.

## Installation

```
pip install .
```

## Command line

The numbers can be given as separate arguments or as one quoted string, which
is split on spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The first command prints:

```
ra
sa
```

`python -m pushswap.cli` works the same way.

Input that is already sorted prints nothing, and so does a single number.
Running with no arguments exits with status 1 and prints nothing.

If any input is invalid, `Error` is written to standard error and the exit
status is 1. Input is invalid when:

- a token is not an integer (an optional `+` or `-` followed by digits only),
- a value is outside the 32-bit signed range,
- two tokens stand for the same value (so `0` and `-0` clash),
- there are no numbers at all, for example a single empty string.

## Library use

```python
from pushswap.sorter import solve
from pushswap.validate import parse_numbers, InputError
from pushswap.stacks import Stacks

values = parse_numbers(["3 2 1"])   # [3, 2, 1]; raises InputError on bad input
solve(values)                       # ['ra', 'sa']

stacks = Stacks([2, 1, 3])
stacks.sa()                         # stacks.a is now deque([1, 2, 3])
stacks.operations                   # ['sa']
```

`Stacks` keeps stacks `a` and `b` as deques with the top at the left, and
records every operation that changed something in `operations`. An operation
with too few elements to act on does nothing and is not recorded; `ss`, `rr`
and `rrr` record their two halves separately. Nothing is printed by the
library; printing is done by the command.

`InputError` is a `ValueError`; its `report` attribute is false only when no
arguments were given at all.

The `pushswap.sorter` module also provides the individual pieces: `rank`,
`is_sorted`, `max_bits`, `sort_two`, `sort_three`, `sort_four`, `sort_five`
and `radix_sort`. The helpers `split_arguments`, `is_numeric`, `in_bounds`,
`all_unique` and `check_tokens` live in `pushswap.validate`.

## Supporting modules

The package also carries small general-purpose helpers:

- `pushswap.chars`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`).
- `pushswap.strings`: string search, comparison, trimming, slicing, splitting
  and bounded copying (`strchr`, `strcmp`, `split`, `strlcpy`, and others).
- `pushswap.numbers`: `atoi` and `atol`, which read a leading integer and wrap
  to 32 or 64 bits, and `itoa`.
- `pushswap.memory`: operations on `bytearray` buffers (`memset`, `memcpy`,
  `memmove`, `memcmp`, `memchr`, `bzero`, `calloc`).
- `pushswap.output`: writing characters, strings and numbers to a file
  descriptor.
- `pushswap.linked`: a singly linked `LinkedList` of `Node` cells.

## What it does not do

There is no checker command that reads a list of operations and verifies that
they sort the input; the package only produces the operations.