"""CLI: python -m exprparse METHOD [options]"""

from .cli import main


if __name__ == "__main__":
    main()
