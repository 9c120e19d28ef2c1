class HullError(Exception):
    """
    Base class for all errors raised by hull computations.
    """


class InvalidPointSetError(HullError, ValueError):
    """
    Point collection is absent or holds something that is not a finite 2D point.
    """


class HullConvergenceError(HullError, RuntimeError):
    """
    Gift-wrap walk did not return to its start vertex within n steps.
    """
