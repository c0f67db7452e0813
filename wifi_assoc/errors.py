"""Exception hierarchy for wifi-assoc.

Every error the CLI reports cleanly derives from :class:`WifiAssocError`.
Anything else that escapes ``main`` is a bug.
"""

from typing import List, Optional


class WifiAssocError(Exception):
    """Base class for errors reported to the user with exit status 1."""


class UsageError(WifiAssocError):
    """Malformed command line (bad action, missing parameter, unknown flag)."""


class InterfaceNotFound(WifiAssocError):
    """No wireless interface is present, or the requested one does not exist."""


class SubsystemError(WifiAssocError):
    """A wireless-subsystem command failed.

    ``message`` is the subsystem's own error text; ``command`` and
    ``returncode`` describe the invocation when there was one.
    """

    def __init__(self, message: str, returncode: Optional[int] = None,
                 command: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.returncode = returncode
        self.command = command


class ScanFailed(SubsystemError):
    """The subsystem could not produce scan results."""


class AssociationFailed(SubsystemError):
    """The subsystem rejected or timed out the association request."""
