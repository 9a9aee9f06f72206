"""Allow running TomlStash with ``python -m tomlstash``."""

from tomlstash.cli.main import cli_main

if __name__ == "__main__":
    cli_main()
