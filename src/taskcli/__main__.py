"""Allow running taskcli as ``python -m taskcli``."""

from taskcli import main

if __name__ == "__main__":
    main()
