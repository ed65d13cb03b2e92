"""Edit-distance string similarity."""


def edit_distance(first: str, second: str) -> int:
    """
    Levenshtein distance between two strings, ignoring case.

    Counts the single-character insertions, deletions and substitutions
    needed to turn ``first`` into ``second``.
    """
    a = first.lower()
    b = second.lower()

    # table[i][j] = distance between a[:i] and b[:j]
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        table[i][0] = i
    for j in range(len(b) + 1):
        table[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,  # deletion
                table[i][j - 1] + 1,  # insertion
                table[i - 1][j - 1] + cost,  # substitution
            )

    return table[len(a)][len(b)]


def similarity(first: str, second: str) -> int:
    """
    Similarity score from 0 to 100 based on edit distance.

    Two empty strings are identical and score 100.
    """
    a = first.lower()
    b = second.lower()
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 100

    distance = edit_distance(a, b)
    return _round_half_up(100 * (max_len - distance) / max_len)


def _round_half_up(value: float) -> int:
    """Round .5 upwards like the scores shown to the operator."""
    return int(value + 0.5)
