import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Grid:
    frame_width: int
    frame_height: int
    columns: int
    rows: int

    def cells(self):
        """Yield (row, column, box) in row-major order; box is (left, top, right, bottom)."""
        for row in range(self.rows):
            top = row * self.frame_height
            for column in range(self.columns):
                left = column * self.frame_width
                yield row, column, (left, top, left + self.frame_width, top + self.frame_height)


def compute_grid(config, width, height):
    # Explicit values win; the other side of each pair is floor-divided
    # out of the source size.
    columns = config.columns or width // config.frame_width
    rows = config.rows or height // config.frame_height
    frame_width = config.frame_width or width // config.columns
    frame_height = config.frame_height or height // config.rows
    return Grid(frame_width, frame_height, columns, rows)


def digits(count):
    # log10(1) is 0, which would give an unpadded field; keep at least one digit.
    if count <= 1:
        return 1
    return max(1, math.ceil(math.log10(count)))


def filename_format(grid, mirror=False):
    row_digits = digits(grid.rows)
    column_digits = digits(grid.columns)
    fmt = f"-{{row:0{row_digits}d}}-{{column:0{column_digits}d}}.png"
    if mirror:
        fmt = "-{side}" + fmt
    return "{prefix}" + fmt


def frame_filename(fmt, prefix, row, column, side=None):
    return fmt.format(prefix=prefix, side=side, row=row, column=column)
