"""file_manager package: interactive shell for navigating and operating on the local filesystem.

Subpackages are imported directly; keep __all__ empty so the package stays import-light.
"""

__all__: list[str] = []
