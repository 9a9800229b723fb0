"""Record schemas for fetched catalog entities.

Records are partial by default. Every field beyond the urn is optional and
may be filled in later as more query fragments resolve.
"""
