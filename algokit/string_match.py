"""Z-function, prefix function, KMP automaton and Manacher's palindromes."""


def z_function(s):
    """``z[i]``: length of the longest common prefix of ``s`` and ``s[i:]``; ``z[0] = 0``."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def prefix_function(s):
    """``pi[i]``: length of the longest proper border of ``s[:i + 1]``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def kmp_automaton(s):
    """Transition table over ``a``-``z`` for matching ``s``; state ``len(s)`` means a match.

    Row ``i`` holds the next state for each letter after ``i`` characters matched.
    """
    text = s + "#"
    pi = prefix_function(text)
    table = []
    for i, ch in enumerate(text):
        row = []
        for c in range(26):
            letter = chr(ord("a") + c)
            if i > 0 and letter != ch:
                row.append(table[pi[i - 1]][c])
            else:
                row.append(i + (letter == ch))
        table.append(row)
    return table


def prefix_occurrences(s):
    """``result[k]``: how many times the prefix of length ``k`` occurs in ``s``."""
    n = len(s)
    pi = prefix_function(s)
    counts = [0] * (n + 1)
    for p in pi:
        counts[p] += 1
    for i in range(n - 1, 0, -1):
        counts[pi[i - 1]] += counts[i]
    return [c + 1 for c in counts]


def manacher(s):
    """Palindrome radii ``(odd, even)`` around every position.

    ``odd[i]`` counts the palindromes centred on ``s[i]``; ``even[i]`` those
    centred between ``s[i - 1]`` and ``s[i]``.
    """
    n = len(s)
    odd = [0] * n
    left, right = 0, -1
    for i in range(n):
        k = min(odd[right - i + left], right - i + 1) if i <= right else 1
        while i + k < n and i - k >= 0 and s[i + k] == s[i - k]:
            k += 1
        odd[i] = k
        if i + k - 1 > right:
            left, right = i - k + 1, i + k - 1
    even = [0] * n
    left, right = 0, -1
    for i in range(n):
        k = min(even[right - i + left + 1], right - i + 1) if i <= right else 0
        while i + k < n and i - k - 1 >= 0 and s[i + k] == s[i - k - 1]:
            k += 1
        even[i] = k
        if i + k - 1 > right:
            left, right = i - k, i + k - 1
    return odd, even