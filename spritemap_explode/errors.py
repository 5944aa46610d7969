class SpritemapError(Exception):
    exit_code = 1


class ConfigError(SpritemapError):
    exit_code = 1


class SourceOpenError(SpritemapError):
    exit_code = 2


class SourceDecodeError(SpritemapError):
    exit_code = 3


class UnsupportedFormatError(SpritemapError):
    exit_code = 4
