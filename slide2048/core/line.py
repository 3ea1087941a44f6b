"""
Slide-and-merge reduction of a single line (row or column) of the board.
"""

from numpy import array, ndarray, zeros


def merge_tiles(tiles: ndarray) -> list[int]:
    """
    Merge adjacent equal values of a dense sequence of tiles.

    Parameters
    ----------
    tiles : ndarray
        Non-zero tile values, in order.

    Returns
    -------
    list[int]
        The tile values after merging, front first.

    Notes
    -----
    - Merging occurs from the start of the sequence towards the end.
    - A tile produced by a merge is never merged again in the same pass.
    """
    merged = []

    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged.append(int(tiles[i]) * 2)
            i += 2
        else:
            merged.append(int(tiles[i]))
            i += 1

    return merged


def reduce_line(line: ndarray) -> ndarray:
    """
    Slide the tiles of a line toward its front and merge equal neighbours once.

    Parameters
    ----------
    line : ndarray
        A 1D array of cell values, oriented so that index 0 is the edge the tiles move to.

    Returns
    -------
    ndarray
        A new array of the same length, padded with zeros at the back.

    Notes
    -----
    - The input array is not modified.
    - ``[2, 2, 2, 2]`` reduces to ``[4, 4, 0, 0]`` and ``[2, 2, 4, 0]`` to ``[4, 4, 0, 0]``.
    """
    line = array(line)

    # ##: Drop empty cells, then merge what is left.
    merged = merge_tiles(line[line != 0])

    result = zeros(len(line), dtype=line.dtype)
    result[: len(merged)] = merged
    return result
