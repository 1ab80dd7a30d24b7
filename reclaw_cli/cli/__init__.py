"""
CLI Module.

Command-line surface built with Typer for talking to the gateway.

Architecture:
- CLI is a thin presentation layer
- Request building and response validation live in reclaw_cli.gateway
- Rendered payloads go to stdout, errors and logs to stderr

Usage:
    reclaw-cli --help
    reclaw-cli health
    reclaw-cli --json info
    reclaw-cli rpc system.healthz --params '{}'
"""
