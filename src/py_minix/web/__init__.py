"""Browser-based web UI for py-minix.

This package provides a Flask application that exposes the shell over
HTTP.  It is an **optional** extra — install with::

    pip install py-minix[web]

The ``create_app`` factory in ``app.py`` boots a state, creates a
shell, and serves three endpoints:

- ``GET /`` — the boot log as plain text.
- ``POST /api/execute`` — execute a shell command and return JSON.
- ``GET /api/status`` — session state for polling.
"""
