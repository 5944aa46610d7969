import argparse
import sys

from spritemap_explode.config import ExplodeConfig
from spritemap_explode.errors import ConfigError, SpritemapError
from spritemap_explode.logging_config import configure_logging
from spritemap_explode.splitter import SpriteMap, explode

DESCRIPTION = """\
Creates files for each frame in a sprite map. The new files will be named
using the scheme <prefix>-<row index>-<column index>.png. Empty frames will be
omitted. The rows and columns are counted starting with 0."""


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(ConfigError.exit_code, f"{self.prog}: error: {message}\n")


def uint(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
MIRROR_FLAGS = ('-mirror-left', '--mirror-left')


def parse_bool(value):
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def expand_bool_flags(parser, argv):
    """Rewrite -mirror-left=<bool> into a bare flag; the value only ever attaches with '='."""
    expanded = []
    for position, arg in enumerate(argv):
        if arg == '--':
            expanded.extend(argv[position:])
            break
        flag, sep, value = arg.partition('=')
        if sep and flag in MIRROR_FLAGS:
            try:
                arg = '--mirror-left' if parse_bool(value) else '--no-mirror-left'
            except argparse.ArgumentTypeError as e:
                parser.error(f"argument -mirror-left: {e}")
        expanded.append(arg)
    return expanded


def build_parser():
    parser = ArgumentParser(
                    prog='spritemap-explode',
                    description=DESCRIPTION,
                    formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('filename', nargs='?', help='sprite map to slice')
    parser.add_argument('-width', '--width', type=uint, default=0,
                        help='Frame width of one sprite')
    parser.add_argument('-height', '--height', type=uint, default=0,
                        help='Frame height of one sprite')
    parser.add_argument('-columns', '--columns', type=uint, default=0,
                        help='Number of columns. Frame width is calculated by dividing '
                             'the source image width by this number.')
    parser.add_argument('-rows', '--rows', type=uint, default=0,
                        help='Number of rows. Frame height is calculated by dividing '
                             'the source image height by this number.')
    parser.add_argument('-mirror-left', '--mirror-left', action='store_const', default=False, const=True,
                        help='Every frame is duplicated and flipped on the y axis, i.e. facing left '
                             'if it has been facing right before. The file name scheme is then '
                             'extended to <prefix>-<l|r>-<row index>-<column index> with r being '
                             'the original. Also accepts -mirror-left=<true|false>.')
    parser.add_argument('--no-mirror-left', dest='mirror_left', action='store_const', const=False,
                        help=argparse.SUPPRESS)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_const', dest='log_level', const='INFO')
    verbosity.add_argument('-q', '--quiet', action='store_const', dest='log_level', const='ERROR')
    return parser


def parse_config(parser, argv=None):
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(expand_bool_flags(parser, argv))
    if args.filename is None:
        parser.error("exactly one sprite map file is required")
    config = ExplodeConfig.from_args(args)
    try:
        config.validate()
    except ConfigError as e:
        print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(e.exit_code)
    return config, args


def main(argv=None):
    parser = build_parser()
    config, args = parse_config(parser, argv)
    configure_logging(args.log_level)

    try:
        sprite_map = SpriteMap.open(config.filename)
    except SpritemapError as e:
        print(e, file=sys.stderr)
        sys.exit(e.exit_code)

    explode(config, sprite_map)
    return 0


if __name__ == "__main__":
    sys.exit(main())
