# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for modelschema."""
