"""Package entry point for ``python -m wordbytes``.

WHY: Users run the codec as ``python -m wordbytes decode < words.txt``
without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from wordbytes.cli import main

if __name__ == "__main__":
    main()
