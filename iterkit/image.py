"""Small RGB images made of coloured pixels, grouped and drawn as text."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

MAX_IMAGE_SIZE = 30
MAX_GROUP_SIZE = 20
MIN_CONCENTRATION = 0
MAX_CONCENTRATION = 255
HEADER_WIDTH = 50
GROUP_HEADER_CHAR = "*"
IMAGE_HEADER_CHAR = "="
DEFAULT_IMAGE_FILE = "Images.txt"


class Dimension(Enum):
    """The axis an image operation applies to."""

    WIDTH = 1
    HEIGHT = 2


def clamp_concentration(value: int, increment: int) -> int:
    """Add ``increment`` to ``value`` and keep the result within 0..255."""
    return max(MIN_CONCENTRATION, min(MAX_CONCENTRATION, value + increment))


@dataclass
class Pixel:
    """A colour given by its red, green and blue concentrations.

    Also used for colour differences, where components may be negative.
    """

    red: int = 0
    green: int = 0
    blue: int = 0

    def add(self, increment: Pixel) -> None:
        """Add ``increment`` component by component, clamping each to 0..255."""
        self.red = clamp_concentration(self.red, increment.red)
        self.green = clamp_concentration(self.green, increment.green)
        self.blue = clamp_concentration(self.blue, increment.blue)

    def symbol(self) -> str:
        """'R', 'V' or 'B' for a pure primary colour, ' ' for black, 'Q' otherwise."""
        present = (self.red != 0, self.green != 0, self.blue != 0)
        return {
            (True, False, False): "R",
            (False, True, False): "V",
            (False, False, True): "B",
            (False, False, False): " ",
        }.get(present, "Q")


def _check_size(value: int, what: str) -> None:
    if not 0 <= value <= MAX_IMAGE_SIZE:
        raise ValueError(f"{what} must be between 0 and {MAX_IMAGE_SIZE}, got {value}")


def _header(char: str, title: str) -> list[str]:
    line = char * HEADER_WIDTH
    return [line, title, line]


@dataclass
class Image:
    """A named image of ``height`` rows of ``width`` pixels, black by default."""

    name: str
    width: int
    height: int
    pixels: list[list[Pixel]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        _check_size(self.width, "width")
        _check_size(self.height, "height")
        if not self.pixels:
            self.pixels = [
                [Pixel() for _ in range(self.width)] for _ in range(self.height)
            ]
        elif len(self.pixels) != self.height or any(
            len(row) != self.width for row in self.pixels
        ):
            raise ValueError("pixel grid does not match the image size")

    def pixel(self, x: int, y: int) -> Pixel:
        """The pixel in column ``x`` of row ``y``."""
        self._check_position(x, y)
        return self.pixels[y][x]

    def _check_position(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")

    def double_size(self, dimension: Dimension, colour: Pixel) -> None:
        """Double the image along ``dimension``, filling new pixels with ``colour``.

        The result never exceeds the maximum image size.
        """
        if dimension is Dimension.WIDTH:
            new_width = min(self.width * 2, MAX_IMAGE_SIZE)
            for row in self.pixels:
                row.extend(replace(colour) for _ in range(new_width - self.width))
            self.width = new_width
        elif dimension is Dimension.HEIGHT:
            new_height = min(self.height * 2, MAX_IMAGE_SIZE)
            self.pixels.extend(
                [replace(colour) for _ in range(self.width)]
                for _ in range(new_height - self.height)
            )
            self.height = new_height
        else:
            raise ValueError(f"unknown dimension {dimension!r}")

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Replace the pixel in column ``x`` of row ``y`` with a copy of ``pixel``."""
        self._check_position(x, y)
        self.pixels[y][x] = replace(pixel)

    def render(self) -> str:
        """The image as text: a header with its name, then one character per pixel."""
        lines = _header(IMAGE_HEADER_CHAR, f"Nom de l'image: {self.name}")
        lines.extend("".join(p.symbol() for p in row) for row in self.pixels)
        lines.append(IMAGE_HEADER_CHAR * HEADER_WIDTH)
        return "\n".join(lines) + "\n"


@dataclass
class ImageGroup:
    """Images of one type, at most ``MAX_GROUP_SIZE`` of them."""

    type: str = ""
    images: list[Image] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self) -> Iterator[Image]:
        return iter(self.images)

    def __getitem__(self, index: int) -> Image:
        return self.images[index]

    def add(self, image: Image) -> bool:
        """Append ``image`` if there is room; return whether it was added."""
        if len(self.images) >= MAX_GROUP_SIZE:
            return False
        self.images.append(image)
        return True

    def find(self, name: str) -> int | None:
        """Index of the first image called ``name``, or None if there is none."""
        return next(
            (index for index, image in enumerate(self.images) if image.name == name),
            None,
        )

    def render(self) -> str:
        """The group as text: a header with its type, then every image."""
        head = "\n".join(
            _header(GROUP_HEADER_CHAR, f"Type du groupe d'images : {self.type}")
        )
        return head + "\n" + "".join(image.render() for image in self.images)


def _read_image(name: str, width: int, height: int, numbers: Iterator[int]) -> Image:
    rows = [
        [Pixel(next(numbers, 0), next(numbers, 0), next(numbers, 0)) for _ in range(width)]
        for _ in range(height)
    ]
    return Image(name, width, height, rows)


def read_images(path: str | Path) -> ImageGroup:
    """Read every image stored in the file at ``path``.

    Each image is a name, a width and a height, followed by the red, green
    and blue values of its pixels row by row, all separated by whitespace.
    A missing file gives an empty group; reading stops at the first header
    that cannot be read, and images beyond the group's capacity are dropped.
    """
    group = ImageGroup()
    try:
        text = Path(path).read_text()
    except OSError:
        return group

    tokens = iter(text.split())
    valid = True

    def numbers() -> Iterator[int]:
        nonlocal valid
        for token in tokens:
            try:
                yield int(token)
            except ValueError:
                valid = False
                return
        valid = False

    while valid:
        header = [next(tokens, None) for _ in range(3)]
        if None in header:
            break
        name, width_text, height_text = header
        try:
            width, height = int(width_text), int(height_text)
        except ValueError:
            break
        if width < 0 or height < 0:
            break
        image = _read_image(name, width, height, numbers())
        group.add(image)
    return group


def _adjust(image: Image, x: int, y: int, red: int = 0, green: int = 0, blue: int = 0) -> None:
    if x < image.width and y < image.height:
        image.pixel(x, y).add(Pixel(red, green, blue))


def main(argv: Sequence[str] | None = None) -> int:
    """Load the image file, apply the demonstration edits and print the group."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_IMAGE_FILE

    group = read_images(path)
    group.type = "Images de tests"

    green_index = group.find("Image_Verte")
    red_index = group.find("Image_Rouge")

    if green_index is not None:
        green = group[green_index]
        green.double_size(Dimension.HEIGHT, Pixel(0, 0, 255))
        _adjust(green, 2, 1, blue=100)
    if red_index is not None:
        red = group[red_index]
        red.double_size(Dimension.WIDTH, Pixel(255, 0, 0))
        _adjust(red, 1, 1, red=-255, blue=50)

    sys.stdout.write(group.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())