"""Plain-text formatting of a game board."""

from numpy import ndarray


def format_board(board: ndarray, empty: str = '.') -> str:
    """
    Format the board as tab-separated rows.

    Parameters
    ----------
    board : ndarray
        The game board.
    empty : str, optional
        Placeholder shown for empty cells (default is ``'.'``).

    Returns
    -------
    str
        One line per row, cells separated by tabs.
    """
    return '\n'.join('\t'.join(str(value) if value != 0 else empty for value in row) for row in board.tolist())
