# iterkit

Small iteration tools for Python. Most of them can be called directly or
placed at the end of a `|` pipe. The package also holds a small toolkit for
images that are drawn as text.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Core helpers (`iterkit.iterbase`)

- `Pipeable(func, position=0)` wraps a function so that it can be applied
  as `iterable | tool`. `position` is the index of the iterable among the
  positional arguments. If a call does not supply an iterable at that
  position, the call binds the arguments it was given and returns a new
  `Pipeable` that waits for the iterable. This is what lets
  `iterable | tool(arg)` work. When a non-iterable is passed where the
  iterable belongs, `TypeError` is raised.
- `advance(iterator, distance)` consumes up to `distance` items and never
  goes past the end. It returns how many items it consumed. A negative
  distance raises `ValueError`.
- `skip(iterable, distance)` returns an iterator with the first `distance`
  items already skipped.
- `size(iterable)` uses `len()` when the iterable has a length. Otherwise
  it counts the items.
- `is_iterable(obj)` tells whether `iter(obj)` succeeds.
- `are_same(*args)` is true when every argument is the very same object,
  for example the same type.

## Generators and windows (`iterkit.windows`)

- `combinations(iterable, length)` yields every `length`-item combination
  as a tuple, in index order. It yields nothing when the length is zero or
  larger than the iterable. `combinations(length)` on its own returns a
  tool, used as `iterable | combinations(length)`.
- `count(start=0, step=1)` counts without end. A step of zero yields
  nothing.
- `cycle(iterable)` yields the items over and over. It yields nothing if
  the iterable is empty. It can also be used as `iterable | cycle`.
- `repeat(element, times=None)` yields `element` `times` times, or forever
  when `times` is omitted. A negative count is treated as zero.
- `sliding_window(iterable, size)` yields each run of `size` consecutive
  items as a tuple. It yields nothing when the size is zero or larger than
  the iterable. `sliding_window(size)` on its own returns a tool for use
  with `|`.

A negative length or window size raises `ValueError`.

```python
from iterkit.windows import combinations, sliding_window

list(combinations([1, 2, 3, 4], 3))
# [(1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4)]
list([1, 2, 3, 4] | sliding_window(2))
# [(1, 2), (2, 3), (3, 4)]
```

## Mapping and filtering (`iterkit.mapping`)

- `enumerated(iterable, start=0)` yields `EnumYield` named tuples. Each one
  has `.index` and `.element`, also available as `.first` and `.second`,
  and unpacks like a pair. Both `iterable | enumerated` and
  `iterable | enumerated(start)` work.
- `starmap(func, iterable)` calls `func` with each item unpacked as its
  arguments. It can also be written as `iterable | starmap(func)`.
- `imap(func, *iterables)` calls `func` with one item from each iterable
  and stops at the shortest. With a single iterable it can also be written
  as `iterable | imap(func)`.
- `zipped(*iterables)` yields tuples of matching items and stops at the
  shortest iterable.
- `filterfalse(predicate, iterable)` keeps the items for which the
  predicate is false. Called with only an iterable, or used as
  `iterable | filterfalse`, it keeps the falsy items.
  `iterable | filterfalse(predicate)` also works.
- `unique_everseen(iterable)` yields each item the first time it is seen.
  The items must be hashable.
- `unique_justseen(iterable)` yields the first item of every run of equal
  neighbours.

```python
from iterkit.mapping import enumerated, unique_justseen

for index, letter in enumerated("hey", 5):
    print(index, letter)          # 5 h, 6 e, 7 y

list([1, 1, 2, 2, 3, 1] | unique_justseen)   # [1, 2, 3, 1]
```

## Images (`iterkit.image`)

### Pixels

- `Pixel(red, green, blue)` holds the three colour concentrations of a
  pixel.
  - `add(increment)` adds another pixel component by component. Each
    result is clamped to 0..255.
  - `symbol()` returns the character used to draw the pixel: `R`, `V` or
    `B` for a pure primary colour, a space for black, and `Q` for anything
    else.
- `clamp_concentration(value, increment)` adds the increment to one
  concentration and keeps the result within 0..255.

### Images

`Image(name, width, height)` is a grid of pixels that starts black. Each
dimension must be between 0 and 30, otherwise `ValueError` is raised. An
`Image` has these methods:

- `pixel(x, y)` returns the pixel at column `x`, row `y`.
- `set_pixel(x, y, pixel)` replaces the pixel at that position. A position
  outside the image raises `IndexError`.
- `double_size(dimension, colour)` doubles the image along
  `Dimension.WIDTH` or `Dimension.HEIGHT`, filling the new pixels with
  `colour`. The size is capped at 30.
- `render()` returns the image as text. The text starts with a header of
  `=` lines around the image name, followed by one character per pixel.

### Groups of images

`ImageGroup(type)` holds up to 20 images. It supports `len()`, iteration
and indexing, plus these methods:

- `add(image)` adds an image and returns `False` when the group is full.
- `find(name)` returns the index of the first image with that name, or
  `None` if there is none.
- `render()` draws a `*` header with the group's type, followed by every
  image.

### Reading files

`read_images(path)` loads a group from a text file of whitespace-separated
tokens. Each image is written as a name, a width and a height, followed by
the red, green and blue values of its pixels, row by row. A missing file
gives an empty group. Reading stops at the first header that cannot be
read, and images beyond the group's capacity are dropped.

### The `iterkit-images` command

```
iterkit-images [path]
```

The command reads the file at `path`, or `Images.txt` when no path is
given, and sets the group's type to `Images de tests`. It then edits two
images, if the file contains them:

- `Image_Verte` is doubled in height with blue pixels, and the pixel at
  (2, 1) gains 100 blue.
- `Image_Rouge` is doubled in width with red pixels, and the pixel at
  (1, 1) loses 255 red and gains 50 blue.

Finally it prints the whole group to standard output.

### Limits

The image toolkit only reads files. The command does not write the edited
images back to disk, and images cannot be shown other than as printed text.