"""
Entry point for running the Video Range Proxy as a module.
"""

from .main import main

if __name__ == "__main__":
    main()
