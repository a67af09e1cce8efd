"""Entry point for ``python -m quadforge``."""

from quadforge.cli.main import main


if __name__ == "__main__":
    main()
