"""
reclaw-cli.

Operational client for a reclaw gateway server.

- core/: Configuration, logging, error taxonomy
- gateway/: Envelope builder, HTTP transport, response validator, dispatcher
- cli/: Typer command-line surface
"""

__version__ = "0.1.0"
