# lambdas/site_builder/renderer.py
import mimetypes
from concurrent.futures import ThreadPoolExecutor, as_completed
from html import escape
from pathlib import Path
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .models import THUMBNAIL_PREFIX, AlbumListing, AlbumMetadata, UploadReport
from .walker import walk_template

HOMEPAGE_NAME = "index.html"
ARTICLES_PLACEHOLDER = "{articles}"

# Never uploaded: macOS folder metadata and the stylesheet sources
SKIPPED_FILENAMES = {".DS_Store"}
SKIPPED_PATH_FRAGMENT = "assets/sass/"

ARTICLE_TEMPLATE = (
    "\t\t\t\t\t\t<article class=\"thumb\">\n"
    "\t\t\t\t\t\t\t<a href=\"{album}/index.html\" class=\"image\"><img src=\"{thumbnail}\" alt=\"\" /></a>\n"
    "\t\t\t\t\t\t\t<h2>{title}</h2>\n"
    "\t\t\t\t\t\t</article>\n"
)


def should_skip(relative_path: str) -> bool:
    return Path(relative_path).name in SKIPPED_FILENAMES or SKIPPED_PATH_FRAGMENT in relative_path


def display_title(album: str, metadata: Optional[AlbumMetadata]) -> str:
    if metadata and metadata.title:
        return metadata.title
    return album


def render_articles(listing: AlbumListing, metadata: List[Optional[AlbumMetadata]]) -> str:
    """
    Builds the homepage thumbnail grid, one <article> per album.

    Albums without any .jpg have no cover image and are left off the page.
    """
    articles = []
    for album, pictures, album_metadata in zip(listing.albums, listing.pictures, metadata, strict=True):
        if not pictures:
            print(f"⚠️ Album '{album}' has no .jpg pictures. Leaving it off the homepage.")
            continue
        articles.append(ARTICLE_TEMPLATE.format(
            album=escape(album),
            thumbnail=escape(THUMBNAIL_PREFIX + pictures[0]),
            title=escape(display_title(album, album_metadata)),
        ))
    return "".join(articles)


def render_file(path: Path, articles: str) -> bytes:
    """Returns the bytes to upload for a template file."""
    body = path.read_bytes()
    if path.name == HOMEPAGE_NAME:
        body = body.decode('utf-8').replace(ARTICLES_PLACEHOLDER, articles, 1).encode('utf-8')
    return body


def guess_content_type(path: str) -> str:
    content_type, _ = mimetypes.guess_type(path)
    return content_type or "application/octet-stream"


def _put_file(s3, bucket: str, path: Path, key: str, articles: str) -> str:
    s3.put_object(
        Bucket=bucket,
        Key=key,
        Body=render_file(path, articles),
        ContentType=guess_content_type(key),
    )
    return key


def upload_site(
    s3,
    bucket: str,
    template_dir: Path,
    listing: AlbumListing,
    metadata: List[Optional[AlbumMetadata]],
    max_workers: int,
) -> UploadReport:
    """
    Renders the template tree and uploads every file to the site bucket,
    keyed by its path relative to the template root.

    Uploads run concurrently. A failed upload is recorded in the report
    and does not stop the others. Nothing is retried.
    """
    template_dir = Path(template_dir)
    articles = render_articles(listing, metadata)
    report = UploadReport()

    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futures = {}
        for path in walk_template(template_dir):
            key = path.relative_to(template_dir).as_posix()
            if should_skip(key):
                report.skipped.append(key)
                continue
            futures[ex.submit(_put_file, s3, bucket, path, key, articles)] = key

        for fut in as_completed(futures):
            key = futures[fut]
            try:
                report.uploaded.append(fut.result())
            except (ClientError, BotoCoreError, OSError, UnicodeDecodeError) as e:
                report.failed[key] = str(e)

    if report.failed:
        first_key = next(iter(report.failed))
        print(f"❌ Failed to upload {len(report.failed)} file(s) to s3://{bucket}. First error ({first_key}): {report.failed[first_key]}")
    print(f"✅ Uploaded {len(report.uploaded)} file(s) to s3://{bucket}, skipped {len(report.skipped)}.")
    return report
