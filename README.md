# routemin

Building blocks for a route minimization heuristic for the vehicle routing
problem with time windows (VRPTW): customer records, capacity-penalty
bookkeeping for routes, command-line option parsing, and a small set of
low-level integer and bitmap helpers.

The package uses only the standard library and supports Python 3.10 and
later.

## Modules

| Module              | What it provides                                                  |
|---------------------|-------------------------------------------------------------------|
| `routemin.bits`     | Loads and stores in host byte order, bitmap operations, bit counting, rotations, byte swaps, bit indexing and iteration |
| `routemin.int96`    | `Int96`, an immutable 96-bit integer for overflow-safe sums of 64-bit values |
| `routemin.cli`      | `parse_arguments`, `usage`, `CliOptions`, `LogLevel`, `CliError`  |
| `routemin.customer` | `Customer`, a customer (or depot) with coordinates, demand, time window and cached route values |
| `routemin.capacity` | Capacity penalty of routes and the change caused by route modifications |

## Bit helpers

```python
from routemin import bits

bits.ctz_u32(8)            # 3 trailing zero bits (32 for zero)
bits.count_u64(0xFF)       # 8 set bits
bits.bswap_u16(0x1234)     # 0x3412
bits.rotl_u32(1, 4)        # 16; the rotation must be in 1..31

buf = bytearray(bits.bitmap_size(100))   # rounded up to whole machine words
bits.bit_set(buf, 5)       # False: the previous value of the bit
bits.bit_test(buf, 5)      # True
list(bits.iter_bits(buf))  # [5]; iter_bits(buf, False) yields the clear bits
```

`load_*` and `store_*` read and write fixed-size values at a byte offset in a
buffer, in the host byte order; stores truncate integers to their width.
`bit_index_u32(x, offset)` and `bit_index_u64(x, offset)` return a list of the
1-based positions of the set bits of `x`, each plus `offset`, in ascending
order.

## 96-bit integers

`Int96` is a frozen value: `add`, `invert` and the `+`, `-` and unary `-`
operators return new numbers.

```python
from routemin.int96 import Int96

total = Int96.from_unsigned(2**64 - 1) + Int96.from_signed(-1)
total.is_uint64()        # True
total.extract_uint64()   # 18446744073709551614

neg = Int96.from_signed(0) - Int96.from_unsigned(5)
neg.is_neg_int64()       # True
neg.extract_neg_int64()  # -5
```

`from_unsigned` and `from_signed` raise `ValueError` for values outside the
64-bit range; the `extract_*` methods raise `ValueError` when the number does
not fit.

## Command-line options

`parse_arguments(argv)` takes an argument vector (program name, problem file,
solution file, then options) and returns a `CliOptions`. Unknown options,
stray arguments and bad values raise `CliError`. With fewer than three items
in `argv` it prints `usage(prog)` and raises `SystemExit(0)`.

Supported options:

- `--beta_correction` — enable the beta-correction mechanism
- `--log_level none|normal|verbose` — log level (default `verbose`)
- `--n_near <int>` — neighbourhood size (default 100)
- `--k_max <int>` — maximum ejection size (default 5)
- `--t_max <int>` — time budget in seconds
- `--t_max_ms <int>` — time budget in milliseconds; sets `has_t_max_ms`
- `--i_rand <int>` — perturbation iterations (default 1000)
- `--lower_bound <int>` — known lower bound on the number of routes (default 0)
- `--seed <int>` — pseudo-random seed, unsigned 64-bit; sets `has_seed`
- `--initial_solution <file>` — path of an initial solution
- `--log_incumbent_solutions` — request logging of incumbent routes

Integer options take 32-bit signed values.

```python
from routemin.cli import parse_arguments

opts = parse_arguments(["routes", "problem.txt", "out.sol", "--k_max", "3"])
opts.k_max      # 3
```

## Customers

`Customer` holds an `id`, coordinates `x`, `y`, `demand`, time window `e`..`l`,
service time `s`, the cached prefix and suffix values used while it sits in a
route, and its `route` and position `idx`. `dup()` returns a copy that belongs
to no route; `is_ejected()` is true when `route` is `None`.

## Capacity penalty

A route is any sequence of `Customer` objects that starts and ends at the
depot. `c_penalty_init(route)` fills in each customer's `demand_pf` and
`demand_sf` (prefix and suffix demand sums). The functions then take the
route(s), the customers involved and the vehicle `capacity`, and return the
capacity penalty (demand in excess of the capacity) without changing the
route:

- `c_penalty(route, capacity)`
- `insert_penalty` / `insert_delta` — insert `w` before `v`
- `eject_penalty` / `eject_delta` — remove `v`
- `replace_penalty` / `replace_delta` — replace `v` with `w`
- `one_opt_penalty` / `two_opt_penalty_delta` — swap the tails after `v` and
  `w` of two different routes (`ValueError` for the same route)
- `out_relocate_penalty_delta` — move `w` before `v`
- `exchange_penalty_delta` — swap `v` and `w`

The last two return 0 when both customers are in the same route. After part of
a route changes, `c_penalty_update_forward(route, start)` and
`c_penalty_update_backward(route, start)` refresh the sums from `start` on.

## What the package does not do

There is no solver and no command to run: the package does not read problem
files, build or search for solutions, apply route modifications, evaluate
time-window penalties or distances, or write solution files. `parse_arguments`
only collects the options such a program would use.

## Running the tests

The test suite uses pytest and hypothesis, available through the `test`
extra:

```
pip install -e .[test]
pytest
```