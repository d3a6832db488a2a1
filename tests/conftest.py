# tests/conftest.py
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


def make_client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} (simulated)"}}, operation)


def listing_entry(key: str, hour: int) -> dict:
    """A Contents entry as returned by list_objects_v2."""
    return {"Key": key, "LastModified": datetime(2024, 6, 1, hour, tzinfo=timezone.utc)}


@pytest.fixture
def template_dir(tmp_path):
    """
    A small site template: the homepage, a stylesheet, the sass sources
    and some macOS litter.
    """
    root = tmp_path / "multiverse"
    (root / "assets" / "css").mkdir(parents=True)
    (root / "assets" / "sass").mkdir(parents=True)
    (root / "index.html").write_text("<div id=\"main\">\n{articles}\n</div>\n", encoding="utf-8")
    (root / "assets" / "css" / "main.css").write_text("body { margin: 0; }\n")
    (root / "assets" / "sass" / "main.scss").write_text("$bg: #242629;\n")
    (root / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (root / "assets" / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    return root


@pytest.fixture
def cloudfront_client() -> MagicMock:
    cloudfront = MagicMock()
    cloudfront.get_paginator.return_value.paginate.return_value = [
        {"DistributionList": {"Items": [
            {"Id": "EOTHER", "DomainName": "d999999zzzzzz9.cloudfront.net"},
            {"Id": "EDFDVBD632BHDS5", "DomainName": "d111111abcdef8.cloudfront.net"},
        ]}}
    ]
    cloudfront.create_invalidation.return_value = {"Invalidation": {"Id": "I2J0I21PCUYOIK", "Status": "InProgress"}}
    return cloudfront
