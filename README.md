# starpatterns

Classic console patterns built from stars, numbers and letters: square
grids, triangles, pyramids, diamonds and butterflies. Each pattern is
sized by a single whole number `n`.

## Installation

```
pip install .
```

## Command line

```
starpatterns [pattern] [size] [--list]
```

- `pattern` is the name of a pattern. It defaults to `star_triangle`.
  Case is ignored, and hyphens may stand for underscores, so
  `Star-Pyramid` picks `star_pyramid`.
- `size` is the number `n`. When it is left out, the command prompts with
  `Enter the Number : ` and reads it from standard input. Only the first
  word of that input is used.
- `--list` prints the names of all patterns, one per line, and exits.

Examples:

```
starpatterns --list
starpatterns star_pyramid 4
starpatterns butterfly
```

An unknown pattern name, a missing size or a size that is not a whole
number is reported as a usage error, and the command exits with status 2.

## Library use

Every pattern is a function in `starpatterns.patterns` that takes `n` and
returns the rows of the pattern as a list of strings:

```python
from starpatterns.patterns import star_pyramid, render

for line in star_pyramid(3):
    print(line)

print(render("butterfly", 4), end="")
```

Each cell in a row is followed by one space, so rows end in a space.
Indented patterns use two spaces per missing cell; `star_diamond` uses one.
A size of zero or less gives no rows.

- `get_pattern(name)` looks up a pattern function by name, ignoring case
  and treating hyphens as underscores. It raises `ValueError` for an
  unknown name.
- `render(name, n)` returns the named pattern as one string, with each row
  ended by a newline.
- `PATTERNS` maps every pattern name to its function.

## Patterns

Squares and grids:

- `square_of_tens` — `n - 1` rows of `n` tens
- `row_numbers` — an n-by-n square where each cell holds its row number
- `descending_columns` — `n` rows, each counting down from `n` to 1
- `squares` — `n` rows, each listing the squares of 1 to `n`
- `row_letters` — an n-by-n square where each cell holds its row's
  lower-case letter
- `row_letters_five` — `n` rows of five cells holding the row's letter
- `counting_square` — an n-by-n square filled with 1, 2, 3, …

Left-aligned triangles:

- `star_triangle`, `number_triangle`, `reverse_number_triangle`,
  `letter_row_triangle`, `letter_triangle`
- `inverted_star_triangle`, `inverted_number_triangle`,
  `descending_from_n_triangle`

Right-aligned triangles:

- `right_star_triangle`, `right_row_number_triangle`,
  `right_number_triangle`, `right_letter_triangle`,
  `right_reverse_number_triangle`

Pyramids and diamonds:

- `star_pyramid`, `number_palindrome_pyramid`, `letter_pyramid`,
  `inverted_star_pyramid`
- `hollow_diamond` — two star wings narrowing to a diamond-shaped hole
  and widening back, `2n` rows
- `butterfly` — two star wings widening to a full row and narrowing again,
  `2n - 1` rows
- `star_diamond` — a diamond of stars whose widest row appears twice

For example, `render("star_pyramid", 3)` gives:

```
    * 
  * * * 
* * * * * 
```

## Running the tests

```
pip install -e ".[test]"
pytest
```