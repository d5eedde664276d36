# kaptisto

A hex dumper, a path remover and a few integer arithmetic helpers.

## Installation

```
pip install .
```

## Commands

### kaptisto-xxd

This command prints a hex dump of a file. Each row has three parts:

- an 8-digit hex offset followed by `: `,
- sixteen bytes, shown in groups of two bytes,
- a column of characters, where each byte outside printable ASCII is shown as `.`.

```
kaptisto-xxd input.bin              # dump to standard output
kaptisto-xxd -u input.bin           # use upper-case hex digits
kaptisto-xxd input.bin dump.txt     # write the dump to dump.txt
```

Example output:

```
00000000: 4865 6c6c 6f2c 2077 6f72 6c64 210a       Hello, world!.
```

The character column always starts at the same position, so a short last row
is padded with spaces. Trailing spaces at the end of the dump are removed.

The command behaves as follows in special cases:

- With no input file, it prints nothing and exits with status 0.
- If the input cannot be read or the output cannot be written, it logs the error and exits with status 1.

`-u` is the only option.

### kaptisto-rm

This command removes a file or a whole directory tree and logs the outcome.

```
kaptisto-rm build/
```

A symbolic link is removed as a link; its target is left alone. If the path does not exist, or the removal fails, the command logs an error. It exits with status 0 in every case.

## Library use

```python
from kaptisto.xxd import Xxd, hexdump
from kaptisto.mathops import add, div

print(hexdump(b"Hello", upper_case=True))

dump = Xxd(b"\x00\x01\x02")
dump.run()          # returns the dump and also stores it in dump.result
print(dump.result)

print(add(2, 3), div(7, 2), div(-7, 2))   # 5 3 -3
```

### kaptisto.xxd

- `hexdump(data, upper_case=False)` returns the dump as a string.
- `Xxd` is a dataclass. It holds `raw_data`, `upper_case` and `fmt`. After `run()`, it also holds `result`.
- `XxdFormat` describes the column layout. It has the fields `idx_col`, `hex_cols`, `ascii_col` and `row_length`.
- `read_raw_data(filename)` reads a whole file as bytes.
- `save_to_file(filename, contents)` writes a string to a file, replacing the file.

### kaptisto.rm

`remove_path(target_path)` deletes a file, a link or a directory tree. It returns `True` on success. If the path is missing or the removal fails, it logs an error and returns `False`.

### kaptisto.mathops

`add`, `sub`, `mul` and `div` work on integers. `div` truncates toward zero and raises `ZeroDivisionError` when the divisor is zero.

## What is not included

The package has command-line tools and library functions only. It has no graphical interface and no screen-capture tool.

## Tests

```
pip install .[test]
pytest
```