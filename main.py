#!/usr/bin/env python3
"""Entry point for the blog server. See ``blog.cli`` for the subcommands."""

from blog.cli import main

if __name__ == "__main__":
    main()
