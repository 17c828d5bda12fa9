"""
CLI Module.

Command-line front end built with Typer.

Architecture:
- CLI is a thin presentation layer
- All storage logic lives in nfa.services.note.NoteManager
- The store is opened lazily, only by commands that need it

Usage:
    nfa --help
    nfa "quick note"
    nfa list
"""
