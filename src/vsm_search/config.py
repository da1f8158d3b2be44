"""Default settings shared by the library and the command line."""


class Config:
    """
    Global defaults.

    The CLI may override ``top_n`` per run; the remaining values are fixed.
    """

    top_n: int = 10  # Results shown per query
    extensions: tuple[str, ...] = (".md", ".txt")  # Compared case-insensitively
    quit_command: str = "quit"
    score_precision: int = 2  # Display only, scores are never rounded for ranking
