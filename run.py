"""
Entry Point Script (Bootstrap)
==============================
Runs the command line interface straight from a source checkout.

Why is this file needed?
------------------------
It sits outside the 'src' package and puts 'src' on 'sys.path', so
'surfacegraph' resolves without installing the project first.

Usage:
    $ python run.py stats
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from surfacegraph.cli import app

if __name__ == "__main__":
    app()
