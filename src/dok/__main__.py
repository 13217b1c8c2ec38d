"""dok CLI bootstrap."""

from dok.cli import main

if __name__ == "__main__":
    main()
