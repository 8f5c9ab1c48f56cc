"""Readable, sentence-style reports for ``cargo test`` output."""
