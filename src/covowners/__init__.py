__version__ = "0.1.0"

__all__ = [
    "__version__",
    "audit",
    "cli",
    "config",
    "contracts",
    "core",
    "errors",
    "exit_codes",
    "maintainers",
    "report",
]
