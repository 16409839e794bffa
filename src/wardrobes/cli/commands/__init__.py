"""CLI command implementations for the wardrobes application.

This package contains subcommands for the wardrobes CLI, including:
- validate: Validate a configuration file
"""

from wardrobes.cli.commands.validate import validate_command

__all__ = ["validate_command"]
