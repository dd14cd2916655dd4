"""Entry point for ``python -m gemini_planning``."""

from .server import main

if __name__ == "__main__":
    main()
