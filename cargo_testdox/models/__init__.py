"""Data models shared by the parser, runner and renderer."""
