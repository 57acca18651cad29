"""Allow ``python -m helpwrap`` to act as the wrapper."""

from helpwrap.cli.shim import cli_main

if __name__ == "__main__":
    cli_main()
