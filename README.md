# stringplus

A small library of C-style string routines and a `sprintf`/`sscanf` pair
that follows the printf and scanf conversion rules.

## Installing

```
pip install .
```

The library has no dependencies beyond the standard library. To run the
tests, install the `test` extra and run `pytest`.

## String routines

`stringplus.cstring` offers the familiar byte and string functions:
`memchr`, `memcmp`, `memcpy`, `memset`, `strncpy`, `strcpy`, `strlen`,
`strcmp`, `strncmp`, `strcat`, `strncat`, `strchr`, `strrchr`, `strstr`,
`strpbrk` and `strcspn`.

Text arguments are ordinary `str` objects, and as in C a `"\0"` character
ends a string. The `mem*` functions work on `bytes`-like objects, and
`memcpy` and `memset` change the `bytearray` they are given. Where the C
function would return a pointer into its argument, these return an index,
or `None` in place of a null pointer:

```python
from stringplus.cstring import strchr, strcmp, strstr, tokenize

strstr("School 21", "cho")          # 1
strchr("School 21", "x")            # None
strcmp("School 21", "school 21")    # -32
list(tokenize("Sch/ool/21/heh", "/ "))  # ["Sch", "ool", "21", "heh"]
```

`tokenize` is a generator that yields the non-empty pieces of a text split
on any of a set of delimiter characters, the way repeated `strtok` calls
would.

`stringplus.transform` holds the text helpers:

```python
from stringplus.transform import insert, to_lower, to_upper, trim

to_upper("SCHool 21")                   # "SCHOOL 21"
to_lower("SCHOOL 21")                   # "school 21"
insert("School", " 21", 4)              # "Scho 21ol"
trim(" \n\b School 21 \n\b", " \n\b")   # "School 21"
```

`insert` raises `ValueError` when the index lies outside the string.

## Formatting

```python
from stringplus.sprintf import sprintf

sprintf("%+5d", 12456)      # "+12456"
sprintf("%20s", "School 21")
sprintf("%% kek %d", 21)    # "% kek 21"
```

The conversions `c d u o x X p s f e E g G` are supported together with
the `- + space # 0` flags, field width, precision (including `*`) and the
`h`, `l` and `L` length modifiers. Integers are wrapped to the width of
the C type the length modifier names. A malformed directive or a missing
argument raises `stringplus.spec.FormatError`.

The pieces `sprintf` is built from can be used on their own:
`stringplus.spec` splits and parses a directive into a `FormatSpec`
(`split_directive`, `parse_spec`), `stringplus.intformat` formats
characters, integers and strings (`format_char`, `format_signed`,
`format_unsigned`, `format_string`), and `stringplus.floatformat`
formats floating-point values (`format_float`, `format_nonfinite`).

## Parsing

`stringplus.sscanf.sscanf(text, format)` reads `text` according to
`format` and returns a list of the values it converted, in order:

```python
from stringplus.sscanf import sscanf

sscanf("School 21 is cool", "%s")   # ["School"]
sscanf("School 21 is cool", "%5s")  # ["Schoo"]
```

It handles the conversions `c d i u o x X p s n f e E g G`, `%*`
suppression, field widths and the `h`, `l` and `L` length modifiers.
A `(nil)` pointer reads as `None`, and `%n` gives the number of
characters read so far. Input holding nothing but white space raises
`EOFError`.

## What it does not do

The package has no error-message lookup in the manner of `strerror`, and
the `stringplus.tetris` sub-package is empty: there is no game and no
command to start one.