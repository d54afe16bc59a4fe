"""HTTP surface over the bot core."""
