from typing import Any, Sequence


def get_closest(target: float, candidates: Sequence[Any]) -> Any:
    """
    Return the candidate whose numeric value is the closest to target.
    Candidates may be numbers or numeric strings (mapping keys); the
    selected one is returned as given. Equally close candidates resolve
    to the lower one.
    """
    if not candidates:
        raise ValueError('No candidate to choose from')
    return min(candidates, key=lambda c: (abs(float(c) - target), float(c)))
