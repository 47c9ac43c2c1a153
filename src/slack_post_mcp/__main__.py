"""Allow ``python -m slack_post_mcp``."""

from slack_post_mcp.cli import main

main()
