# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..models.status import CheckStatus


def classify(total: float, warning: float, critical: float) -> CheckStatus:
    """Verdict for a total duration. A value equal to a threshold stays in the lower tier."""
    if total > critical:
        return CheckStatus.CRITICAL
    if total > warning:
        return CheckStatus.WARNING
    return CheckStatus.OK
