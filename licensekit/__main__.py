# Copyright (C) 2025 licensekit Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
import sys

from licensekit.cli_main import main

if __name__ == "__main__":
    sys.exit(main())
