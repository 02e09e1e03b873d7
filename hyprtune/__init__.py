# File: hyprtune/__init__.py
"""
hyprtune - live terminal editor for Hyprland appearance settings.

Reads and rewrites individual values of an ``appearance.conf`` in place,
leaving comments, ordering and unrelated blocks untouched.
"""
