# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .backend import Deadline, TimedNetworkBackend, TimedNetworkStream
from .recorder import PhaseRecorder
from .transport import ClientFactory, TimedTransport, build_client

__all__ = [
    "ClientFactory",
    "Deadline",
    "PhaseRecorder",
    "TimedNetworkBackend",
    "TimedNetworkStream",
    "TimedTransport",
    "build_client",
]
