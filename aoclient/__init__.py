"""Client-side logic for an online courtroom drama role-playing game: settings, favourite servers, evidence, emotes, paging and lobby text."""

__version__ = "2.11.0"