"""
Error types shared by every engine.

All engines validate their input before recording a single step, so a
raised ValidationError always means "nothing was computed".
"""


class ValidationError(ValueError):
    """
    Malformed or out-of-range input.

    Raised for wrong bit lengths, alphabets that are too small, non-positive
    probabilities, empty text, empty graphs and duplicate graph nodes.
    Subclasses ValueError so callers catching the builtin keep working.
    """
