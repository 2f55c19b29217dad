"""Host environment lookups."""

from __future__ import annotations

import os
import socket


def get_machine_name() -> str:
    """Return the name of the machine this process runs on.

    Prefers the hostname reported by the OS; falls back to COMPUTERNAME/HOSTNAME.
    Raises OSError when no name can be determined.
    """
    name = socket.gethostname().strip()
    if name:
        return name
    for var in ("COMPUTERNAME", "HOSTNAME"):
        value = os.environ.get(var, "").strip()
        if value:
            return value
    raise OSError("Unable to determine machine name")
