"""Utility functions for loading schema documents.

This module provides functions for loading JSON schema documents from
files and URLs and converting them into the schema model.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import Schema, SchemaError, parse_schema
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Raised when a schema document cannot be read or converted."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load a JSON document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load JSON from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded JSON from %s", file_path)
        return str(file_path), data
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load a JSON document from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load JSON from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()
        logger.info("Loaded JSON from %s", url)
        return url, data

    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Schema]:
    """Load a schema from either a file or URL.

    Args:
        file_path: Path to local schema file (mutually exclusive with url).
        url: URL to fetch the schema from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, schema model).

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        source, document = load_json_from_file(file_path)
    else:
        source, document = load_json_from_url(url, timeout)

    try:
        schema = parse_schema(document)
    except SchemaError as e:
        logger.error("Invalid schema in %s: %s", source, e)
        raise SchemaLoaderError(f"Invalid schema in {source}: {e}") from e

    logger.debug(
        "Parsed schema %s with %d top-level definition(s)",
        schema.namespace,
        len(schema.definitions),
    )
    return source, schema
