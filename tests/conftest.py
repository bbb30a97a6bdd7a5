"""Pytest fixtures for cms-flag-preview tests."""

import json
from unittest.mock import MagicMock

import pytest

from cms_flag_preview.clients import ContentstackClient

BASE_URL = "https://cdn.contentstack.io/v3"


@pytest.fixture
def make_response():
    """Factory for mock httpx responses."""

    def _make(status_code=200, payload=None, text=None, path="/"):
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.json.return_value = payload
        response.text = text if text is not None else json.dumps(payload or {})
        response.url = f"{BASE_URL}{path}"
        return response

    return _make


@pytest.fixture
def contentstack_config():
    """Configuration for ContentstackClient."""
    return {"api_key": "blt-test-api-key", "delivery_token": "cs-test-delivery-token"}


@pytest.fixture
def contentstack_client(contentstack_config):
    """ContentstackClient whose httpx client is a MagicMock."""
    client = ContentstackClient(contentstack_config)
    client._client = MagicMock()
    return client


@pytest.fixture
def route_requests(make_response):
    """Route mocked requests by path.

    Returns a function that installs a side effect on a mocked httpx client,
    answering each path from ``routes`` (path -> (status, payload)) and
    404 for anything else.
    """

    def _install(mock_http_client, routes):
        def _respond(method, path, **kwargs):
            status_code, payload = routes.get(path, (404, {"error_code": 141}))
            return make_response(status_code, payload, path=path)

        mock_http_client.request.side_effect = _respond
        return mock_http_client

    return _install


@pytest.fixture
def sample_entry_payload():
    """Sample Contentstack entry, as found under the response's "entry" key."""
    return {
        "uid": "blt0f6ddaddb7222b8d",
        "title": "Spring Launch Landing Page",
        "summary": "Everything new this spring.",
        "body": "<p>Welcome to the <strong>spring launch</strong>.</p>",
        "image": {
            "uid": "bltimage0001",
            "url": "https://images.contentstack.io/v3/assets/stack/bltimage0001/hero.jpg",
            "filename": "hero.jpg",
        },
        "locale": "en-us",
        "_version": 3,
        "tags": ["launch"],
    }


@pytest.fixture
def sample_asset_payload():
    """Sample Contentstack asset, as found under the response's "asset" key."""
    return {
        "uid": "blt211dac063fd6e948",
        "title": "Hero Banner",
        "filename": "hero-banner.png",
        "url": "https://images.contentstack.io/v3/assets/stack/blt211dac063fd6e948/hero-banner.png",
        "file_size": "48213",
        "content_type": "image/png",
        "dimension": {"width": 1600, "height": 900},
        "_version": 1,
    }


@pytest.fixture
def sample_content_types():
    """Sample content type listing response."""
    return {
        "content_types": [
            {"uid": "header", "title": "Header"},
            {"uid": "page", "title": "Page"},
            {"uid": "blog_post", "title": "Blog Post"},
        ]
    }


@pytest.fixture
def sample_request_body():
    """Sample flag preview request body with request-supplied credentials."""
    return {
        "variation": {
            "value": {
                "cmsType": "contentstack",
                "entryId": "blt0f6ddaddb7222b8d",
                "environment": "preview",
                "contentType": "page",
            }
        },
        "config": {
            "contentstack": {
                "apiKey": "blt-test-api-key",
                "deliveryToken": "cs-test-delivery-token",
                "environment": "preview",
            }
        },
    }
