import os
from dataclasses import dataclass

from spritemap_explode.errors import ConfigError


@dataclass(frozen=True)
class ExplodeConfig:
    filename: str
    prefix: str
    frame_width: int = 0
    frame_height: int = 0
    columns: int = 0
    rows: int = 0
    mirror_left: bool = False

    @classmethod
    def from_args(cls, args):
        # Only the last extension is dropped; the directory part stays so
        # frames land beside the source.
        prefix, _ = os.path.splitext(args.filename)
        return cls(
            filename=args.filename,
            prefix=prefix,
            frame_width=args.width,
            frame_height=args.height,
            columns=args.columns,
            rows=args.rows,
            mirror_left=args.mirror_left,
        )

    def validate(self):
        for name in ("frame_width", "frame_height", "columns", "rows"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative")
        if self.frame_height == 0 and self.rows == 0:
            raise ConfigError("Need to set either -height or -rows")
        if self.frame_width == 0 and self.columns == 0:
            raise ConfigError("Need to set either -width or -columns")
        return self
