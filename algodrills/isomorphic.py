"""Whether two strings are isomorphic under a one-to-one character mapping."""

from __future__ import annotations


def is_isomorphic(s: str, t: str) -> bool:
    """Return whether each character of s can be replaced to give t, one to one."""
    if len(s) != len(t):
        return False
    s_to_t: dict[str, str] = {}
    t_to_s: dict[str, str] = {}
    for a, b in zip(s, t):
        if s_to_t.get(a, b) != b or t_to_s.get(b, a) != a:
            return False
        s_to_t[a] = b
        t_to_s[b] = a
    return True