"""Input preprocessing shared by the header and line parsers."""


def preprocess(text: str) -> list[str]:
    """Split input text into physical lines.

    Lines are separated by ``\\n``; a trailing ``\\r`` is removed from each
    line. A newline at the very end of the text does not start another line.

    Parameters
    ----------
    text : str
        The raw song text.

    Returns
    -------
    list[str]
        Lines without line terminators.

    Examples
    --------
    >>> preprocess("#TITLE:Song\\r\\n: 0 1 2 la\\nE\\n")
    ['#TITLE:Song', ': 0 1 2 la', 'E']
    >>> preprocess("")
    []
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
