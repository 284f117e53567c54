"""
Entry point for running the demo as a module: `python -m shinyconsole`

The `shinyconsole` console script defined in pyproject.toml calls the same
`main()` function.
"""

from .main import main

if __name__ == "__main__":
    main()
