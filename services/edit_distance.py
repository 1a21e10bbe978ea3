"""Levenshtein edit distance over Unicode code points."""


def edit_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``.

    Python strings index by code point, so precomposed Hangul syllables
    count as one character each ("찌개" vs "찌게" is distance 1).
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Two-row DP; the shorter string drives the row width
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]
