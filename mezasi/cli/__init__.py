"""
CLI Client Module.

Command-line client for the VM management service, built on Typer and Rich.

Architecture:
- CLI is a thin presentation layer; VM state lives in the service
- Commands are declared as CommandDescriptors and run by the Dispatcher
- Requests go over HTTP (httpx) through one EndpointClient per process
- Every request carries the client's User-Agent header

Usage:
    mezasi --help
    mezasi list
    mezasi register --name vm1 --base ubuntu --public-key ~/.ssh/id_ed25519.pub --wait
    mezasi ssh vm1 -l root
"""
