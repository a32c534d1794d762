# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
