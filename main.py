# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI com as APIs de blog e de controle de despesas.
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from demo_api.models import blog, expense
from demo_api.routes import (blog_fastapi, categories_fastapi, transactions_fastapi,
                             reports_fastapi)
from demo_api.database import engine, Base
import seed_demo_data

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cria as tabelas no banco de dados
    Base.metadata.create_all(bind=engine)
    logging.info("Tabelas criadas com sucesso!")
    if seed_demo_data.seed_enabled():
        seed_demo_data.seed_demo_data()
    yield


env = os.getenv("ENVIRONMENT", "development")

docs_url = "/docs" if env != "production" else None
redoc_url = "/redoc" if env != "production" else None

app = FastAPI(
    title="Demo APIs",
    description="API de blog e API de controle de despesas",
    version="0.0.1",
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if env != "production" else None,
    lifespan=lifespan
)

frontend_url = os.getenv("FRONTEND_URL", "http://localhost:5700")

origins = [
    frontend_url,
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Montagem dos routers
app.include_router(blog_fastapi.router, prefix="/blog")
app.include_router(categories_fastapi.router, prefix="/categories")
app.include_router(transactions_fastapi.router, prefix="/transactions")
app.include_router(reports_fastapi.router, prefix="/reports")


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Welcome to the demo APIs! Try /blog/posts or /transactions",
        "documentation": docs_url,
        "endpoints": [
            {"posts": "/blog/posts"},
            {"categories": "/categories"},
            {"transactions": "/transactions"},
            {"monthly_report": "/reports/monthly?year=<int>&month=<int>"}
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
