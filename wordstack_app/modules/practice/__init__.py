# File: wordstack_app/modules/practice/__init__.py
"""Practice modes: listening, quiz and romaji typing."""
