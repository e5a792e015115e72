r"""Optional integrations with third-party libraries.

Each module of this package requires an extra; nothing is imported here so
that ``aretry`` stays importable without them.
"""
