# main.py
"""
Entry Point — amortized loan calculator

Usage
-----
    python main.py -p 39000 -i 7.0 -t 60
    python main.py -m 500 -t 60
    python main.py -h -p 39000 -i 7.0

See loancalc/cli.py for the flags and exit codes.
"""

from __future__ import annotations

from loancalc.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
