"""
mezasi.

Command-line client for a remote virtual-machine management service.

- core/: Configuration, logging, exception hierarchy
- cli/: Endpoint client, command descriptors, dispatcher, commands
- settings/: Packaged YAML settings (application.yaml, logging.yaml)
"""

__version__ = "0.1.0"
