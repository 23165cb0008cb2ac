# Models package init
"""Internal record types held by the NoteStore."""
