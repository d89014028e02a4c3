"""Allow running as ``python -m nmclean``."""

from nmclean.cli import app

if __name__ == "__main__":
    app(prog_name="nmclean")
