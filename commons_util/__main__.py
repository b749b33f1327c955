"""
Main entry point for running the package directly.

    python -m commons_util split-host joelauer-02.c
"""

from commons_util.cli import entry_point

if __name__ == "__main__":
    entry_point()
