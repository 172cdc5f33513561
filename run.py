#!/usr/bin/env python3
"""
Run the Dockerized Service from a source checkout.

Usage:
    python run.py              # serve on $PORT (default 3000)
    python run.py --port 8080
    python run.py check-port
"""
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


if __name__ == "__main__":
    from dockerized_service.cli import main

    sys.exit(main(sys.argv[1:]))
