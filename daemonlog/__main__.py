# daemonlog/__main__.py
from daemonlog.cli import main

if __name__ == "__main__":
    main()
