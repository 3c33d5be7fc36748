"""Canonical conversation identity for a pair of users."""

CONVERSATION_SEPARATOR = "_"


def canonical_pair(user_a: int, user_b: int) -> str:
    """
    Return the conversation key shared by two distinct users.

    The key is symmetric: both IDs are ordered by their string form and
    joined with a separator that cannot occur inside an integer ID.

    Raises:
        ValueError: If both IDs are the same user or an ID contains the separator
    """
    first, second = str(user_a), str(user_b)
    if first == second:
        raise ValueError("A conversation needs two distinct users")
    if CONVERSATION_SEPARATOR in first or CONVERSATION_SEPARATOR in second:
        raise ValueError(f"User IDs may not contain {CONVERSATION_SEPARATOR!r}")
    return CONVERSATION_SEPARATOR.join(sorted((first, second)))
