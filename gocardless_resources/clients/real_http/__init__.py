"""
Real HTTP fetchers.

Talk to the live or sandbox API. Must implement the same interfaces as the
mock fetchers and return records decoded through resources/*.
"""
