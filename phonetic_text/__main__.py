"""Package entry point for ``python -m phonetic_text``.

Delegates to the CLI's main().
"""

from phonetic_text.cli import main

if __name__ == "__main__":
    main()
