"""
Resource families.

Each module declares the records of one API resource and their field tables.
collections.py unwraps response envelopes and decodes list responses.
"""
