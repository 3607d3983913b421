# display/errors.py


class PlacementError(AssertionError):
    """
    Content was placed outside the bounds of a block or style overlay.

    This is a layout defect, not a user error: sizes must be computed before
    placement and blocks never grow while being written to.
    """
    pass
