"""
services/ — Presentation and export

Modules:
    presenter.py          - ScoreResult → RenderableSummary, session → FormView
    rasterizer.py         - RenderableSummary → RGB bitmap (Pillow)
    document_exporter.py  - Snapshot → rasterize → A4 PDF (reportlab), filenames
    score_app.py          - Interactive controller (input/submit/locale/reset/export)
"""
