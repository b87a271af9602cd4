"""
Application layer for the program library.

This package contains:
- ports/: Protocol interfaces for storage collaborators and resolvers
- use_cases/: Instantiation pipeline and preset seeding
- exceptions.py: Error taxonomy
"""
