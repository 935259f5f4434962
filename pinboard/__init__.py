"""
Pinboard Backend

Social bookmarking service: pins, boards, follows, likes and comments.

Package Structure:
==================
    pinboard/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn pinboard.api.main:app --reload
"""
