"""CLI command implementations for authflow.

- run: Interactive app (registration, then user list)
- register: Headless registration
- users: Headless user listing
- config: Manage configuration
"""
