# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""I/O adapters: JSON files, text reports, HTTP server."""
