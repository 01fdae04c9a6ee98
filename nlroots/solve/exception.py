from enum import IntEnum


# Written for nlroots, 2024.


# ======================================================================

class SolverFlag(IntEnum):
    """
    Status codes attached to every solver result.  ``CONVERGED == 0``
    and every other member identifies a distinct kind of failure, in
    keeping with the usual convention that a zero flag means success.
    """
    CONVERGED = 0
    FUNCTION_UNDEFINED = 1
    DERIVATIVE_UNDEFINED_AT_START = 2
    NO_SIGN_CHANGE = 3
    STALLED_DENOMINATOR = 4
    NON_FINITE_ITERATE = 5
    SINGULAR_JACOBIAN = 6
    MAX_ITERATIONS_EXCEEDED = 7
    INVALID_INPUT = 8
    JACOBIAN_UNDEFINED = 9


# ----------------------------------------------------------------------

class SolverError(RuntimeError):
    """
    This exception is raised when a failed result is unwrapped (see
    `MethodResult.unwrap` and `SystemResult.unwrap`).  Information about
    the failure is included to allow the reason to be determined and
    the last approximation (if any) to be recovered.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used, e.g. ``root`` or
    ``solution``.
    """

    def __init__(self, *args, flag: SolverFlag = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : SolverFlag, default = None
            Kind of failure.  Typically `flag` != ``CONVERGED``.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                if isinstance(v, SolverFlag):
                    v = v.name
                error_str += f"\n{k} -> {v}"
        return error_str
