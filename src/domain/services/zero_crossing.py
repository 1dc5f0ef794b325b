"""Zero-crossing edge detection for aggregate counters.

Holder and delegate counts are maintained incrementally: a single balance
change moves a counter only when it crosses exactly zero. The counters are
never recomputed from the full entity set.
"""


def zero_crossing_delta(previous: int, current: int) -> int:
    """Return the counter adjustment implied by one balance change.

    Args:
        previous: Balance before the change.
        current: Balance after the change.

    Returns:
        +1 when the balance moves from exactly zero to strictly positive,
        -1 when it moves from strictly positive to exactly zero,
        0 otherwise (including any move into or out of negative values).
    """
    if previous == 0 and current > 0:
        return 1
    if previous > 0 and current == 0:
        return -1
    return 0
