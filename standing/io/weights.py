"""Read and write category weight configurations.

A weights file is a simple CSV with no headers. The first column contains the
category name, and the second contains its weight as a decimal number.
Categories not listed have weight zero.

"""

import pathlib

from ..core import Category, CategoryWeights


def write(path: pathlib.Path, weights):
    """Writes category weights to disk, one line per category."""
    weights = CategoryWeights.resolve(weights)
    with pathlib.Path(path).open("w") as fileobj:
        for category, weight in weights.items():
            fileobj.write(f"{category.value},{weight}\n")


def read(path: pathlib.Path) -> CategoryWeights:
    """Reads category weights from the file.

    Raises
    ------
    ValueError
        If a line is malformed, a category is listed twice, or a weight is
        not between 0 and 1.

    """
    with pathlib.Path(path).open() as fileobj:
        lines = [line.strip() for line in fileobj if line.strip()]

    def parse_line(l):
        try:
            category, weight = l.split(",")
        except ValueError:
            raise ValueError(f"Malformed line in weights file: {l!r}") from None
        return (Category.coerce(category), float(weight))

    pairs = list(map(parse_line, lines))
    categories = [c for c, _ in pairs]
    if len(set(categories)) != len(categories):
        raise ValueError("Weights file lists a category more than once.")

    return CategoryWeights(dict(pairs))
