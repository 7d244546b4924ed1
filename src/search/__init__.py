"""Flight search request validation.

The search layer checks a raw flight-search request against fixed business rules and, only when
every rule passes, commits an immutable copy of the request as the validator's current search.
"""
