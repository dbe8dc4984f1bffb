"""
Journal API: Services Layer
============================

Service Inventory:
    - UserService: User lifecycle over the `users` collection
    - JournalEntryService: entry lifecycle and owner-sequence consistency

Both are stateless singletons; the database handle is passed per call.
"""
