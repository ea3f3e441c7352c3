#!/usr/bin/env python3
"""Thin compatibility entrypoint for the process dashboard."""

from __future__ import annotations

from procview_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
