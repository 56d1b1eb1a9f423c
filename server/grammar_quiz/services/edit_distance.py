"""
Levenshtein edit distance.

Used to forgive small spelling mistakes in typed answers. Inputs are short
phrases, so the full dynamic-programming table is fine.
"""
from typing import Optional

from grammar_quiz.services.normalizer import normalize


def distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Number of single-character insertions, deletions and substitutions
    needed to turn ``a`` into ``b``.

    Both arguments are normalized first, so case and extra whitespace never
    count as edits. Transpositions cost two.
    """
    a = normalize(a)
    b = normalize(b)

    m = len(a)
    n = len(b)

    if m == 0:
        return n
    if n == 0:
        return m

    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost,  # substitution
            )

    return dp[m][n]
