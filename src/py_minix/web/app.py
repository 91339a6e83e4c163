"""Flask application factory for the py-minix web UI.

The ``create_app`` function boots a state, creates a shell, and
returns a Flask app with three endpoints:

- ``GET /`` — return the boot log as plain text.
- ``POST /api/execute`` — execute a command and return JSON.
- ``GET /api/status`` — return whether the session is live and its cwd.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, request

from py_minix.shell import Shell
from py_minix.state import State

_HTTP_BAD_REQUEST = 400


def create_app() -> Flask:
    """Create and configure the Flask application.

    Boot a state, create a shell, and wire up routes.

    Raises:
        BootError: If the startup config cannot be loaded.

    """
    state = State.boot()
    shell = Shell(state=state)
    halted = False

    app = Flask(__name__)

    @app.route("/")
    def index() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the boot log."""
        boot_log = "\n".join(str(e) for e in state.logger.filter(source="boot"))
        return Response(boot_log, mimetype="text/plain")

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a shell command and return JSON output.

        Expects JSON body: ``{"command": "..."}``

        Returns:
            JSON with ``output`` and ``halted`` fields.

        """
        nonlocal halted
        data = request.get_json(silent=True)
        if data is None or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST

        if halted:
            return jsonify({"output": "Session closed.", "halted": True})

        result = shell.execute(str(data["command"]))
        if result == Shell.EXIT_SENTINEL:
            halted = True
            return jsonify({"output": "Session closed.", "halted": True})

        return jsonify({"output": result, "halted": False})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return session status.

        Returns:
            JSON with ``running`` and ``cwd`` fields.

        """
        return jsonify({"running": not halted, "cwd": state.cwd})

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``py-minix-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
