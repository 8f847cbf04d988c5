"""
Guard Test Suite

This package contains the false positive guard tests for the detector rules.

Each guard test file pairs two checks per guard:
1. Prevents False Positive - the guarded pattern is not flagged or rewritten
2. No False Negatives - real injunctions and transformations are still caught

Guards implemented:
- Substring guards: injunction, conjunction and profanity words match whole tokens only
- Causal complement guard: reflexive complement subjects are never transformed
"""
