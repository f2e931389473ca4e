"""
Contracts (shared machinery).

Every resource family is built from the same pieces:
- optional.py     UNSET / NULL / Present(value)
- enumeration.py  known members plus Unknown(raw) for values added later
- links.py        weak by-identifier references and resolve()
- metadata.py     immutable string-to-string annotations
- fields.py       the field-to-wire table entries
- records.py      Record / Resource base classes that walk those tables
- interfaces.py   fetcher interfaces implemented by clients/*
"""
