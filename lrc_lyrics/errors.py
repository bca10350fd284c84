class LrcLyricsError(RuntimeError):
    pass


class ConfigError(LrcLyricsError):
    pass
