#!/usr/bin/env python3
"""
Main entry point for the IRC chat client
"""

from ircchat.main import run

if __name__ == "__main__":
    run()
