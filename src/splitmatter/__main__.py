"""Allow ``python -m splitmatter``."""

from splitmatter.cli import main

if __name__ == "__main__":
    main()
