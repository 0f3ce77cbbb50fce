"""
Generators — produce file contents from scanned project context.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``. Generators are pure: no filesystem access.
"""
