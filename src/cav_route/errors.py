# cav_route/errors.py


class CavRouteError(Exception):
    """Base class for everything raised by cav_route."""


class MalformedInputError(CavRouteError, ValueError):
    """Graph description has the wrong shape or unparsable tokens."""


class InternalInvariantError(CavRouteError, RuntimeError):
    """Search state is inconsistent; indicates a programming defect."""
