"""
Deliberately slow uppercase.

Every iteration builds a brand new string out of the previous one, so a line of
n characters costs O(n^2) character copies. The slowness is the workload: it is
what the single vs multi comparison measures.
"""


def upper_char(c: str) -> str:
    u = c.upper()
    if len(u) == 1:
        return u
    # Full uppercase expands ("ᾳ" -> "ΑΙ"), the single char form is the
    # titlecase one ("ᾼ"). "ß" has none ("SS", "Ss") and stays "ß".
    t = c.title()
    return t if len(t) == 1 else c


def slow_uppercase(line: str) -> str:
    out = ""
    for c in line:
        # `out = out + c` gets resized in place by CPython when `out` has a
        # single reference; join always allocates and copies.
        out = "".join((out, upper_char(c)))
    return out
