"""Allow ``python -m calcfold``."""

from calcfold.cli import main

if __name__ == "__main__":
    main()
