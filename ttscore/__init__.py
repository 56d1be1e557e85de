"""
ttscore — Table Tennis Skill Test Scoring

Packages:
    config.py   - Settings (pydantic-settings)
    core/       - Exceptions, logging
    models/     - Enumerations and pydantic models
    scoring/    - Classifier, Aggregator, ScoreSession
    i18n/       - Two-locale string table
    services/   - Presenter, rasterizer, document exporter, interactive controller
    routers/    - FastAPI routers
"""

__version__ = "1.0.0"
