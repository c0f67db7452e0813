"""Root-level shim entry point for wifi-assoc.

Allows running directly as:  python wifi-assoc.py [args]
"""

if __name__ == "__main__":
    from wifi_assoc.cli import run
    run()
