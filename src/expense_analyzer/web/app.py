"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI

from expense_analyzer.core.config import settings
from expense_analyzer.core.logging_setup import configure_logging
from expense_analyzer.web.routes import upload

configure_logging(settings.EFFECTIVE_LOG_LEVEL)

app = FastAPI(title="Expense Analyzer", debug=settings.DEBUG)

app.include_router(upload.router)
