"""Allow ``python -m mathwatch``."""

from mathwatch.main import run

if __name__ == "__main__":
    run()
