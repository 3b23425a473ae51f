#!/usr/bin/env python3
"""
User Dashboard Aggregator
Entry point for ``python -m user_dashboard.main``
"""
from .cli import main

if __name__ == "__main__":
    main()
