"""State/store layer.

This package is the single source of truth for the location sequence and the
currently selected location, shared by every view that can select one.
"""
