# Services package init
"""
Trapper Keeper Backend — Services Layer
========================================

What:  Business logic layer sitting between routes (HTTP) and the note store.
Why:   Routes handle status codes; services handle presence checks and lookups.

Service Inventory:
    - NoteService: list / create / get / replace / delete over a NoteStore
"""
