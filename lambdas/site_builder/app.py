# lambdas/site_builder/app.py
import json
from pathlib import Path
from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from .albums import derive_albums, list_source_objects
from .invalidator import invalidate_cloudfront
from .metadata import fetch_all_metadata
from .models import SiteBuilderSettings, get_settings
from .renderer import upload_site

# The site template ships alongside the function code
DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "multiverse"


def run_site_build(settings: SiteBuilderSettings, s3, cloudfront, template_dir: Path = DEFAULT_TEMPLATE_DIR) -> Dict[str, Any]:
    """
    Rebuilds the gallery homepage from the original bucket, publishes it to
    the site bucket and invalidates the CloudFront cache.

    Only a failure to list the original bucket stops the run. Metadata,
    upload and invalidation problems are logged and reported in the summary.
    """
    # Step 1: List the original media
    try:
        objects = list_source_objects(s3, settings.original_bucket)
    except (ClientError, BotoCoreError) as e:
        print(f"❌ Could not list s3://{settings.original_bucket}: {e}. Aborting site build.")
        return {"aborted": True, "albums": 0, "uploaded": 0, "skipped": 0, "failed": 0, "invalidation_id": None}

    # Step 2: Group it into albums
    listing = derive_albums(objects)
    print(f"Derived {len(listing.albums)} albums: {', '.join(listing.albums)}")

    # Step 3: Album titles
    metadata = fetch_all_metadata(s3, settings.original_bucket, listing.albums, settings.max_concurrency)

    # Step 4: Render and upload the site
    report = upload_site(s3, settings.site_bucket, template_dir, listing, metadata, settings.max_concurrency)

    # Step 5: Invalidate CloudFront
    invalidation_id = invalidate_cloudfront(cloudfront, settings.cloudfront_distribution_domain)

    return {
        "aborted": False,
        "albums": len(listing.albums),
        "uploaded": len(report.uploaded),
        "skipped": len(report.skipped),
        "failed": len(report.failed),
        "invalidation_id": invalidation_id,
    }


def handler(event: Dict[str, Any], context: object) -> Dict[str, Any]:
    """
    Main Lambda handler. The event payload is not used: every invocation
    rebuilds the whole site.
    """
    print("--- SiteBuilder Lambda Triggered ---")

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"FATAL: Lambda is not configured correctly: {e}")
        return {"statusCode": 500, "body": "Configuration error."}

    s3 = boto3.client('s3')
    cloudfront = boto3.client('cloudfront')

    summary = run_site_build(settings, s3, cloudfront)
    return {"statusCode": 200, "body": json.dumps(summary)}
