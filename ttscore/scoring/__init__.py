"""
scoring/ — Score Engine

Modules:
    utils.py       - Decimal rounding helpers
    classifier.py  - Score → Band classifier
    aggregator.py  - Six-slot group mean (fixed divisor) and band
    session.py     - Input validation, ScoreSession, combined ScoreResult
"""
