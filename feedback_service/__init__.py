"""Feedback sentiment service: collect feedback, classify it, count it."""
