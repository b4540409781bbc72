#!/usr/bin/env python3
"""
Main entry point for the Video Range Proxy.

This script starts the range proxy and content origin listeners.
"""

import sys
import os

# Add the current directory to Python path to import our modules
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from video_range_proxy.main import main

if __name__ == "__main__":
    main()
