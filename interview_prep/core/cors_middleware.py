"""
Description:
Module for adding CORS middleware to FastAPI application.

Arguments:
- app: FastAPI application instance to which CORS middleware will be added.
- origins: Origins allowed to call the API, usually the web front end.

Returns:
- None, but modifies the app to allow cross-origin requests from specified origins.

Dependencies:
- fastapi: For creating the FastAPI application and adding middleware.
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging information about the middleware setup.

Author: @kcaparas1630
"""
from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

def add_cors_middleware(app: FastAPI, origins: List[str]):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    logger.info(f"CORS middleware added for origins: {origins}")
