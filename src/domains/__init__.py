# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer.

This package contains domain services that encapsulate business logic
on top of an externally owned database session.

Domains:
    fixed_group: Fixed groups and their memberships within a class.
"""
