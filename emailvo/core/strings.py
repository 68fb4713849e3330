"""String comparison helpers.

Usage:
    from emailvo.core.strings import str_equals

    str_equals("example.com", "example.com")                 # True
    str_equals("example.com", ["example.org", "example.com"])  # True
    str_equals("Example.com", "example.com", case_sensitive=False)  # True
"""

from collections.abc import Iterable


def str_equals(
    subject: str,
    candidates: str | Iterable[str],
    *,
    case_sensitive: bool = True,
) -> bool:
    """Check whether subject equals a candidate or any of several candidates.

    A single string is treated as one candidate, never as an iterable of
    characters. No trimming is applied to either side.

    Args:
        subject: String to test.
        candidates: One candidate string or an iterable of them.
        case_sensitive: Compare with str.casefold() on both sides when False.

    Returns:
        True if subject matches at least one candidate. An empty iterable
        never matches.

    Example:
        >>> str_equals("joe", {"ann", "joe"})
        True
        >>> str_equals("joe", [])
        False
    """
    if isinstance(candidates, str):
        candidates = (candidates,)

    if case_sensitive:
        return any(subject == candidate for candidate in candidates)

    folded = subject.casefold()
    return any(folded == candidate.casefold() for candidate in candidates)
