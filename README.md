# utilkit

A small toolbox of data structures and everyday helpers:

- `utilkit.algorithms.bubble_sort` returns a new list with the given values in ascending order. The input is not changed.
- `utilkit.hashmap.HashMap` maps integer keys to integer data. It has a fixed number of buckets (24 by default), and entries that land in the same bucket are chained. Adding a key that is already present raises `DuplicateKeyError`, which is a subclass of `KeyError`. `hash_index` gives the bucket for a key. Negative keys are treated as unsigned 64-bit words.
- `utilkit.vector.Vector` is a growable sequence. Its capacity starts at 10, doubles when the vector is full, and halves when fewer than a quarter of the slots are in use.
- `utilkit.string_utils.StringArray` is a growable array of strings that tracks capacity in the same way. The module also provides `strip`, `split_at` and `get_token_index`.
- `utilkit.data_types` prints quick-reference tables: integer type limits, format specifiers, the alphabet, the printable ASCII table and escape characters.
- `utilkit.file_io.read_file` writes the contents of a text file to a stream.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from utilkit.algorithms import bubble_sort
from utilkit.hashmap import HashMap, DuplicateKeyError
from utilkit.vector import Vector
from utilkit.string_utils import StringArray, strip, split_at, get_token_index

bubble_sort([5, 3, 9, 1])          # [1, 3, 5, 9]

table = HashMap()                  # or HashMap(capacity=8)
table.add_entry(7, 42)
table.get(7)                       # 42
table.get(8, -1)                   # -1
7 in table                         # True
len(table)                         # 1
list(table)                        # [7]
try:
    table.add_entry(7, 1)
except DuplicateKeyError:
    pass
table.clear()

vec = Vector()
vec.push(10)
vec.push(5)
vec.pop()                          # 5
vec[0]                             # 10
vec.capacity                       # 10
print(vec.format())

words = StringArray(10)
words.append("hello")
words.append("world")
words.pop()                        # "world"
print(words.format())

strip("a,b,c", ",")                # "abc"
split_at("key=value", "=")         # ("key", "value")
get_token_index("key=value", "=")  # 3
```

Calling `pop` on an empty `Vector` or `StringArray` raises `IndexError`, and so does indexing a `Vector` outside its bounds. The string helpers raise `ValueError` if the delimiter is not a single character.

The reference printers and `read_file` write to standard output by default. Each one takes a `file` argument, so the output can go to any text stream:

```python
import io
from utilkit.data_types import print_ascii_table
from utilkit.file_io import read_file

buffer = io.StringIO()
print_ascii_table(file=buffer)
read_file("notes.txt", file=buffer)   # raises OSError if the file cannot be opened
```

## Command line

```
utilkit
```

This runs a short demonstration of the vector. It pushes 10, 5 and 1, pops the last value, and prints the size, capacity and contents before and after the pop. `utilkit.cli.demo_string_array` runs the same demonstration for `StringArray` when called from Python.

## Limitations

- `HashMap` does not remove single entries and does not resize. It only adds entries, looks them up, and clears them all at once.
- `bubble_sort` is the only sorting algorithm provided.