"""Allow running tartree as a module"""

from .cli.main import main

if __name__ == "__main__":
    main()
