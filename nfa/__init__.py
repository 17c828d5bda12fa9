"""
nfa - local note storage.

- core/: Configuration, logging, exceptions, the SQLite key-value store
- models/: The Note record
- repositories/: Note encoding and key mapping over the store
- services/: NoteManager, the CRUD entry point for notes
- cli/: Command-line front end (Typer + Rich)
"""
