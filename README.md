# primefact

Prime factorization of a list of integers. A pool of worker threads
factorizes the numbers. A second pool of writer threads writes the results
to any object that has a `write(str)` method.

Each result is one line of this form:

```
100 = 2 * 2 * 5 * 5
-17 = -1 * 17
```

A negative number starts with the factor `-1`. `0` and `1` are written as
themselves (`0 = 0`, `1 = 1`). The lines may come out in any order.

## Installation

```
pip install .
```

## Command line

```
primefact [NUMBER ...]
```

The command factorizes the given integers. With no arguments it uses `100`,
`-17` and `25`. It runs two factorization workers and two writer workers,
prints one line per number to standard output, and then prints `Finished`.
If the run fails, it prints the error to standard error and exits with
status 1.

```
$ primefact 12 -10
12 = 2 * 2 * 3
-10 = -1 * 2 * 5
Finished
```

## Library use

```python
import sys
import threading

from primefact.fact import Config, Factorization, factorize, format_factorization

# A single number
factors = factorize(-20)               # [-1, 2, 2, 5]
print(format_factorization(factors))   # "-20 = -1 * 2 * 2 * 5"

# Many numbers, concurrently
done = threading.Event()
Factorization().do(done, [100, -17, 25], sys.stdout,
                   Config(factorization_workers=2, write_workers=2))
```

- `factorize(n)` returns the prime factors of `n` in ascending order, as
  integers. A negative `n` gets a leading `-1`. `0` and `1` return `[n]`.
- `format_factorization(factors)` returns `"<product> = f1 * f2 * ..."`,
  where the left side is the product of the factors. It raises `ValueError`
  for an empty list.

`Factorization.do(done, numbers, writer, config=None)` takes these arguments:

- `done`: a `threading.Event`, or `None`. Setting the event stops the work
  early.
- `numbers`: any iterable of integers.
- `writer`: an object with a `write(str)` method. Several threads call it
  at once, so it must be safe for concurrent use. Each line is written in a
  single call and ends with `"\n"`.
- `config`: a `Config(factorization_workers, write_workers)`, or `None` to
  use `Config.default()`. The default gives each pool one worker per CPU.
  `do` never starts more workers of either kind than there are numbers.

### Errors

All errors derive from `FactorizationError`:

- `InvalidConfigError` (also a `ValueError`): a worker count is zero or
  less. `Config.validate()` raises it, and `do` validates the config before
  it starts any work.
- `FactorizationCancelled`: `done` was set by the end of the run.
- `WriterInteractionError`: the writer raised an exception. All workers
  stop, and the writer's own exception is kept as the error's `__cause__`.