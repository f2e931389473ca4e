"""
Mock fetchers.

Return resources from memory without calling any external API. Used in tests
and offline development; must follow the same interfaces as clients/real_http.
"""
